"""
Translator configuration
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_DIALECT = 'CYPHER2SQL_DIALECT'
ENV_PRETTY = 'CYPHER2SQL_PRETTY'
ENV_IDENTIFY = 'CYPHER2SQL_IDENTIFY'

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}


@dataclass(frozen=True)
class TranslatorConfig:
    """
    Settings for SQL generation

    Attributes:
        dialect: sqlglot dialect used to read WHERE/RETURN clauses and to
            print statements. None selects the generic dialect.
        pretty: Pretty-print generated SQL
        identify: Quote every identifier in generated SQL
    """
    dialect: Optional[str] = None
    pretty: bool = False
    identify: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'TranslatorConfig':
        """Build a config from CYPHER2SQL_* environment variables"""
        environ = os.environ if environ is None else environ
        return cls(
            dialect=environ.get(ENV_DIALECT) or None,
            pretty=environ.get(ENV_PRETTY, '').strip().lower() in _TRUE_VALUES,
            identify=environ.get(ENV_IDENTIFY, '').strip().lower() in _TRUE_VALUES,
        )
