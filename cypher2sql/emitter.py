"""
Statement Emitter
Builds relational statement trees and prints them. The translator only
depends on the StatementBuilder interface; SqlglotStatementBuilder
satisfies it with sqlglot's SQL AST and generator.
"""

import logging
import math
from typing import List, Optional, Protocol, Sequence

import sqlglot.expressions as exp

from .config import TranslatorConfig
from .cypher.ast_nodes import (
    BooleanLiteral,
    FloatLiteral,
    IdentifierReference,
    IntegerLiteral,
    Literal,
    NullLiteral,
    StringLiteral,
)

logger = logging.getLogger(__name__)


class StatementBuilder(Protocol):
    """Capability interface for building and printing relational statements"""

    def build_select(self, table: str, alias: Optional[str],
                     projection: Sequence[exp.Expression],
                     where: Optional[exp.Expression] = None) -> exp.Expression:
        ...

    def build_insert(self, table: str, columns: Sequence[str],
                     values: Sequence[Literal]) -> exp.Expression:
        ...

    def render(self, statement: exp.Expression) -> str:
        ...


def literal_to_sql(literal: Literal) -> exp.Expression:
    """Convert a coerced property value into a SQL expression"""
    if isinstance(literal, NullLiteral):
        return exp.Null()
    if isinstance(literal, BooleanLiteral):
        return exp.Boolean(this=literal.value)
    if isinstance(literal, FloatLiteral) and not math.isfinite(literal.value):
        raise ValueError(f"Float has no SQL literal: {literal.value!r}")
    if isinstance(literal, (IntegerLiteral, FloatLiteral)):
        return exp.Literal.number(literal.value)
    if isinstance(literal, StringLiteral):
        return exp.Literal.string(literal.value)
    if isinstance(literal, IdentifierReference):
        return exp.column(literal.name)
    raise TypeError(f"Unsupported literal value: {type(literal).__name__}")


class SqlglotStatementBuilder:
    """StatementBuilder backed by sqlglot"""

    def __init__(self, config: Optional[TranslatorConfig] = None):
        self.config = config or TranslatorConfig()

    def table(self, name: str, alias: Optional[str] = None) -> exp.Table:
        table_alias = exp.TableAlias(this=exp.to_identifier(alias)) if alias else None
        return exp.Table(this=exp.to_identifier(name), alias=table_alias)

    def build_select(self, table: str, alias: Optional[str],
                     projection: Sequence[exp.Expression],
                     where: Optional[exp.Expression] = None) -> exp.Select:
        """
        Build SELECT <projection> FROM <table> [AS <alias>] [WHERE <where>]

        Args:
            table: Table name
            alias: Table alias, or None
            projection: Select list expressions
            where: Filter expression, or None

        Returns:
            sqlglot Select expression
        """
        if not projection:
            projection = [exp.Star()]

        select = exp.select(*projection, copy=False).from_(self.table(table, alias), copy=False)
        if where is not None:
            select = select.where(where, copy=False)
        return select

    def build_insert(self, table: str, columns: Sequence[str],
                     values: Sequence[Literal]) -> exp.Insert:
        """Build INSERT INTO <table> (<columns>) VALUES (<values>)"""
        if len(columns) != len(values):
            raise ValueError(
                f"Column/value count mismatch: {len(columns)} columns, {len(values)} values"
            )

        row: List[exp.Expression] = [literal_to_sql(value) for value in values]
        schema = exp.Schema(
            this=self.table(table),
            expressions=[exp.to_identifier(column) for column in columns],
        )
        return exp.Insert(
            this=schema,
            expression=exp.Values(expressions=[exp.Tuple(expressions=row)]),
        )

    def render(self, statement: exp.Expression) -> str:
        """Print a statement as SQL text for the configured dialect"""
        sql = statement.sql(
            dialect=self.config.dialect,
            pretty=self.config.pretty,
            identify=self.config.identify,
        )
        logger.debug(f"Rendered SQL: {sql}")
        return sql
