"""
Translation errors
Every failure of the Cypher to SQL pipeline is a CypherTranslationError
"""

from typing import Iterable, Optional


class CypherTranslationError(ValueError):
    """Base class for all translation failures"""
    pass


class LexError(CypherTranslationError):
    """Malformed token in pattern text"""

    def __init__(self, position: int, reason: str,
                 line: Optional[int] = None, column: Optional[int] = None):
        self.position = position
        self.reason = reason
        self.line = line
        self.column = column
        super().__init__(f"Lex error at position {position}: {reason}")


class ParseError(CypherTranslationError):
    """Input violates the bounded pattern grammar"""

    def __init__(self, expected: Iterable[str], found: str, position: Optional[int] = None):
        if isinstance(expected, str):
            expected = [expected]
        self.expected = sorted(set(expected))
        self.found = found
        self.position = position

        where = f" at position {position}" if position is not None else ""
        super().__init__(
            f"Parse error{where}: expected {' or '.join(self.expected)}, found {found}"
        )


class MissingLabel(CypherTranslationError):
    """Pattern carries no label, so there is no table to translate to"""

    def __init__(self, pattern: Optional[str] = None):
        self.pattern = pattern
        message = "Node pattern has no label"
        if pattern:
            message += f": {pattern}"
        super().__init__(message)


class NoProperties(CypherTranslationError):
    """CREATE pattern has no properties to insert"""

    def __init__(self, label: Optional[str] = None):
        self.label = label
        message = "CREATE pattern has no properties to insert"
        if label:
            message += f" into {label}"
        super().__init__(message)


class UnsupportedConstruct(CypherTranslationError):
    """Pattern uses a feature outside the bounded grammar"""

    def __init__(self, construct: str, position: Optional[int] = None):
        self.construct = construct
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Unsupported construct{where}: {construct}")
