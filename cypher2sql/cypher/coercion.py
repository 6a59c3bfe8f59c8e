"""
Property value coercion
Maps literal tokens onto typed Literal values. Coercion never fails:
the fallback for unrecognized text is an identifier reference.
"""

import math
import re
from typing import Union

from .ast_nodes import (
    BooleanLiteral,
    FloatLiteral,
    IdentifierReference,
    IntegerLiteral,
    Literal,
    NullLiteral,
    StringLiteral,
)
from .tokenizer import Token

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Plain decimal integers only; int() would also accept "1_000" and " +5"
_INTEGER_RE = re.compile(r'-?\d+')
# Decimal floats; float() would also accept "inf" and "nan"
_FLOAT_RE = re.compile(r'-?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?')


def _is_quoted(text: str) -> bool:
    return len(text) >= 2 and text[0] == text[-1] and text[0] in ('"', "'")


def coerce_text(text: str) -> Literal:
    """
    Coerce the source text of a literal into a typed value

    First match wins: quoted -> string, true/false -> boolean,
    null -> null, 64-bit integer -> integer, finite decimal number -> float,
    anything else -> identifier reference.
    """
    text = text.strip()

    if _is_quoted(text):
        return StringLiteral(value=text[1:-1])

    lowered = text.lower()
    if lowered in ('true', 'false'):
        return BooleanLiteral(value=lowered == 'true')
    if lowered == 'null':
        return NullLiteral()

    if _INTEGER_RE.fullmatch(text):
        number = int(text)
        if INT64_MIN <= number <= INT64_MAX:
            return IntegerLiteral(value=number)
        # Out of range integers still parse as floats

    if _FLOAT_RE.fullmatch(text):
        number = float(text)
        # inf has no literal spelling
        if math.isfinite(number):
            return FloatLiteral(value=number)

    return IdentifierReference(value=text)


def coerce_literal(token: Union[Token, str]) -> Literal:
    """Coerce a literal token (or its raw text) into a typed value"""
    text = token.text if isinstance(token, Token) else token
    return coerce_text(text)
