"""
cypher2sql

Grammar-based translation of Cypher node patterns into SQL statements.
"""

from .config import TranslatorConfig
from .converter import CypherToSQLConverter, cypher_to_sql
from .cypher.statement import StatementParser, parse_statement
from .emitter import SqlglotStatementBuilder, StatementBuilder
from .errors import (
    CypherTranslationError,
    LexError,
    MissingLabel,
    NoProperties,
    ParseError,
    UnsupportedConstruct,
)
from .request import CreateRequest, MatchRequest, TranslationRequest
from .translator import ClauseTranslator, translate_create, translate_match

__version__ = "0.1.0"

__all__ = [
    "ClauseTranslator",
    "CreateRequest",
    "CypherToSQLConverter",
    "CypherTranslationError",
    "LexError",
    "MatchRequest",
    "MissingLabel",
    "NoProperties",
    "ParseError",
    "SqlglotStatementBuilder",
    "StatementBuilder",
    "StatementParser",
    "TranslationRequest",
    "TranslatorConfig",
    "UnsupportedConstruct",
    "cypher_to_sql",
    "parse_statement",
    "translate_create",
    "translate_match",
]
