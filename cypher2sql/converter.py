"""
Cypher to SQL converter
Runs the whole pipeline: statement parsing, clause translation, rendering
"""

import logging
from typing import Optional

from .config import TranslatorConfig
from .cypher.statement import StatementParser
from .emitter import SqlglotStatementBuilder
from .errors import CypherTranslationError
from .translator import ClauseTranslator

logger = logging.getLogger(__name__)


class CypherToSQLConverter:
    """
    Cypher to SQL converter
    Translates MATCH queries into SELECT and CREATE queries into INSERT
    """

    def __init__(self, config: Optional[TranslatorConfig] = None):
        self.config = config or TranslatorConfig()
        self.statement_parser = StatementParser(dialect=self.config.dialect)
        self.builder = SqlglotStatementBuilder(self.config)
        self.translator = ClauseTranslator(self.builder)

    def translate(self, cypher_query: str):
        """Translate a Cypher statement into a sqlglot statement tree"""
        request = self.statement_parser.parse(cypher_query)
        return self.translator.translate(request)

    def convert(self, cypher_query: str) -> str:
        """
        Translate a Cypher statement into SQL text

        Args:
            cypher_query: MATCH ... RETURN ... or CREATE ... statement

        Returns:
            SQL statement text

        Raises:
            CypherTranslationError: If the statement cannot be translated
        """
        try:
            statement = self.translate(cypher_query)
        except CypherTranslationError as e:
            logger.debug(f"Translation failed: {e}\nQuery: {cypher_query}")
            raise

        sql = self.builder.render(statement)
        logger.debug(f"Translated Cypher to SQL:\n{cypher_query}\n->\n{sql}")
        return sql


def cypher_to_sql(cypher_query: str, dialect: Optional[str] = None, pretty: bool = False) -> str:
    """Translate a Cypher statement into SQL text"""
    config = TranslatorConfig(dialect=dialect, pretty=pretty)
    return CypherToSQLConverter(config).convert(cypher_query)
