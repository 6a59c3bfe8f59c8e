"""
Statement front end
Recognizes MATCH ... [WHERE ...] RETURN ... and CREATE ... statements.
Patterns go through the Cypher pattern parser; WHERE and RETURN bodies
are relational expressions and are parsed by sqlglot.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Union

import sqlglot
import sqlglot.expressions as exp
from lark import Token as LarkToken, v_args
from sqlglot.errors import SqlglotError

from ..errors import ParseError, UnsupportedConstruct
from ..request import CreateRequest, MatchRequest
from .ast_nodes import Pattern
from .parser import CypherParser, CypherTransformer, single_node

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClauseText:
    """Raw text of a WHERE or RETURN body and its offset in the query"""
    text: str
    position: int


@dataclass
class ParsedStatement:
    """Statement shape before the relational clauses are parsed"""
    kind: str
    pattern: Pattern
    where: Optional[ClauseText] = None
    returns: Optional[ClauseText] = None


class StatementTransformer(CypherTransformer):
    """Extends the pattern transformer with statement-level rules"""

    def __init__(self, text: str):
        super().__init__()
        self.text = text

    def statement(self, items):
        return items[0]

    @v_args(meta=True)
    def clause_text(self, meta, items):
        return ClauseText(
            text=self.text[meta.start_pos:meta.end_pos],
            position=meta.start_pos,
        )

    def match_statement(self, items):
        pattern = None
        clauses = {}
        keyword = None

        for item in items:
            if isinstance(item, Pattern):
                pattern = item
            elif isinstance(item, LarkToken) and item.type in ('WHERE', 'RETURN'):
                keyword = item.type
            elif isinstance(item, ClauseText):
                clauses[keyword] = item

        return ParsedStatement(
            kind='MATCH',
            pattern=pattern,
            where=clauses.get('WHERE'),
            returns=clauses.get('RETURN'),
        )

    def create_statement(self, items):
        pattern = next(item for item in items if isinstance(item, Pattern))
        return ParsedStatement(kind='CREATE', pattern=pattern)


def _sql_parse_error(error: SqlglotError, clause: ClauseText, what: str) -> ParseError:
    details = getattr(error, 'errors', None) or []
    description = details[0].get('description') if details else str(error)
    return ParseError(
        expected=what,
        found=f"{clause.text!r} ({description})",
        position=clause.position,
    )


def parse_filter(clause: ClauseText, dialect: Optional[str] = None) -> exp.Expression:
    """Parse a WHERE body into a sqlglot condition"""
    try:
        return exp.condition(clause.text, dialect=dialect)
    except SqlglotError as e:
        raise _sql_parse_error(e, clause, 'filter expression') from e


def parse_return_items(clause: ClauseText, dialect: Optional[str] = None) -> List[exp.Expression]:
    """Parse a RETURN body into sqlglot projection items"""
    try:
        select = sqlglot.parse_one(f"SELECT {clause.text}", read=dialect)
    except SqlglotError as e:
        raise _sql_parse_error(e, clause, 'projection list') from e

    if not isinstance(select, exp.Select):
        raise ParseError(expected='projection list', found=repr(clause.text),
                         position=clause.position)

    modifiers = sorted(key for key, value in select.args.items()
                       if value and key != 'expressions')
    if modifiers:
        raise UnsupportedConstruct(f"RETURN modifiers ({', '.join(modifiers)})",
                                   position=clause.position)

    return list(select.expressions)


class StatementParser:
    """Parses whole MATCH/CREATE statements into translation requests"""

    def __init__(self, dialect: Optional[str] = None):
        self.dialect = dialect
        self.parser = CypherParser()

    def parse_raw(self, query: str) -> ParsedStatement:
        tree = self.parser.parse_tree(query, start='statement')
        return self.parser.transform(tree, query, StatementTransformer(query))

    def parse(self, query: str) -> Union[MatchRequest, CreateRequest]:
        """
        Parse a statement into a translation request

        Args:
            query: Cypher statement text

        Returns:
            MatchRequest or CreateRequest

        Raises:
            LexError, ParseError: On malformed input
            UnsupportedConstruct: On relationships or multiple patterns
        """
        parsed = self.parse_raw(query)
        node = single_node(parsed.pattern)

        if parsed.kind == 'CREATE':
            return CreateRequest(pattern=node)

        where = parse_filter(parsed.where, self.dialect) if parsed.where else None
        return_items = parse_return_items(parsed.returns, self.dialect)
        logger.debug(f"Parsed MATCH statement with {len(return_items)} return items")
        return MatchRequest(pattern=node, where=where, return_items=return_items)


def parse_statement(query: str, dialect: Optional[str] = None) -> Union[MatchRequest, CreateRequest]:
    """Parse a MATCH or CREATE statement into a translation request"""
    return StatementParser(dialect=dialect).parse(query)
