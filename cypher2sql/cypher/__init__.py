"""
Cypher Pattern Tokenizer and Parser
Provides grammar-based parsing of node patterns into AST
"""

from .parser import CypherParser, parse_node_pattern, parse_pattern
from .tokenizer import Token, TokenKind, tokenize
from .coercion import coerce_literal, coerce_text
from .ast_nodes import *

__all__ = [
    'CypherParser',
    'Token',
    'TokenKind',
    'coerce_literal',
    'coerce_text',
    'parse_node_pattern',
    'parse_pattern',
    'tokenize',
]
