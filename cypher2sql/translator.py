"""
Clause Translator
Maps parsed MATCH and CREATE semantics onto relational SELECT and INSERT
statements
"""

import logging
from typing import Optional, Sequence, Union

import sqlglot.expressions as exp

from .cypher.ast_nodes import NodePattern
from .cypher.parser import parse_node_pattern
from .emitter import SqlglotStatementBuilder, StatementBuilder
from .errors import MissingLabel, NoProperties, UnsupportedConstruct
from .request import CreateRequest, MatchRequest, TranslationRequest

logger = logging.getLogger(__name__)


def _as_node_pattern(pattern: Union[NodePattern, str]) -> NodePattern:
    if isinstance(pattern, str):
        return parse_node_pattern(pattern)
    return pattern


def _table_name(pattern: NodePattern) -> str:
    if not pattern.labels:
        raise MissingLabel(pattern.variable and f"({pattern.variable})")
    if len(pattern.labels) > 1:
        logger.warning(f"Rejecting node pattern with labels {list(pattern.labels)}")
        raise UnsupportedConstruct(
            f"multiple labels ({':'.join(pattern.labels)})", position=pattern.position
        )
    return pattern.labels[0]


def is_whole_node_reference(item: exp.Expression, variable: Optional[str]) -> bool:
    """True when a projection item is a bare, unquoted reference to the pattern variable"""
    if variable is None or not isinstance(item, exp.Column):
        return False
    # "n" is a delimited identifier, not the pattern variable
    if item.this.args.get('quoted'):
        return False
    return not item.table and item.name == variable


class ClauseTranslator:
    """Translates node patterns into relational statements"""

    def __init__(self, builder: Optional[StatementBuilder] = None):
        self.builder = builder or SqlglotStatementBuilder()

    def translate_match(self, pattern: Union[NodePattern, str],
                        where: Optional[exp.Expression] = None,
                        return_items: Sequence[exp.Expression] = ()) -> exp.Expression:
        """
        Translate a MATCH pattern into a SELECT

        Args:
            pattern: Node pattern (or its text)
            where: Filter expression, passed through unchanged
            return_items: Projection items. A bare reference to the pattern
                variable becomes '*'; all other items pass through unchanged.

        Returns:
            Select statement over the pattern's label

        Raises:
            MissingLabel: If the pattern has no label
        """
        pattern = _as_node_pattern(pattern)
        table = _table_name(pattern)

        projection = []
        for item in return_items:
            if is_whole_node_reference(item, pattern.variable):
                projection.append(exp.Star())
            else:
                projection.append(item)

        statement = self.builder.build_select(table, pattern.variable, projection, where)
        logger.debug(f"Translated MATCH on {table} into SELECT with {len(projection)} items")
        return statement

    def translate_create(self, pattern: Union[NodePattern, str]) -> exp.Expression:
        """
        Translate a CREATE pattern into an INSERT

        Columns are the property keys in declaration order, values the
        coerced property values in the same order.

        Raises:
            MissingLabel: If the pattern has no label
            NoProperties: If the property map is empty or absent
        """
        pattern = _as_node_pattern(pattern)
        table = _table_name(pattern)

        if not pattern.has_properties:
            raise NoProperties(table)

        columns = pattern.properties.keys()
        values = pattern.properties.values()

        statement = self.builder.build_insert(table, columns, values)
        logger.debug(f"Translated CREATE on {table} into INSERT of {len(columns)} columns")
        return statement

    def translate(self, request: TranslationRequest) -> exp.Expression:
        """Dispatch a match or create request"""
        if isinstance(request, MatchRequest):
            return self.translate_match(request.pattern, request.where, request.return_items)
        if isinstance(request, CreateRequest):
            return self.translate_create(request.pattern)
        raise TypeError(f"Unknown translation request: {type(request).__name__}")


def translate_match(pattern: Union[NodePattern, str],
                    where: Optional[exp.Expression] = None,
                    return_items: Sequence[exp.Expression] = ()) -> exp.Expression:
    return ClauseTranslator().translate_match(pattern, where, return_items)


def translate_create(pattern: Union[NodePattern, str]) -> exp.Expression:
    return ClauseTranslator().translate_create(pattern)
