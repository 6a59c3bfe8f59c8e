"""Command line interface for cypher2sql"""

import logging
import sys

import click

from .config import TranslatorConfig
from .converter import CypherToSQLConverter
from .errors import CypherTranslationError


@click.command()
@click.argument("query")
@click.option("--dialect", default=None, help="sqlglot dialect for the generated SQL")
@click.option("--pretty", is_flag=True, default=False, help="Pretty-print the generated SQL")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def main(query: str, dialect: str, pretty: bool, verbose: bool):
    """
    Translate a Cypher MATCH or CREATE statement into SQL
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    env_config = TranslatorConfig.from_env()
    config = TranslatorConfig(
        dialect=dialect or env_config.dialect,
        pretty=pretty or env_config.pretty,
        identify=env_config.identify,
    )

    try:
        sql = CypherToSQLConverter(config).convert(query)
    except CypherTranslationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(sql)


if __name__ == "__main__":
    main()
