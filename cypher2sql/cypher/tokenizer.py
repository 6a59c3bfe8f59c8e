"""
Cypher Tokenizer
Turns pattern text into a lazy stream of typed tokens using the Lark lexer
generated from grammar.lark
"""

import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Iterator, Optional

from lark import Lark, Token as LarkToken
from lark.exceptions import UnexpectedCharacters

from ..errors import LexError

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


class TokenKind(Enum):
    """Token categories"""
    IDENTIFIER = "identifier"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    PARAMETER = "parameter"
    PUNCTUATION = "punctuation"
    END = "end"


# Lark terminal name -> token kind. Anything not listed is punctuation.
# Statement keywords are names; only the statement grammar reserves them.
_KINDS = {
    'IDENTIFIER': TokenKind.IDENTIFIER,
    'STRING': TokenKind.STRING,
    'NUMBER': TokenKind.NUMBER,
    'BOOLEAN': TokenKind.BOOLEAN,
    'NULL': TokenKind.NULL,
    'PARAMETER': TokenKind.PARAMETER,
    'MATCH': TokenKind.IDENTIFIER,
    'CREATE': TokenKind.IDENTIFIER,
    'WHERE': TokenKind.IDENTIFIER,
    'RETURN': TokenKind.IDENTIFIER,
}

# Readable names for Lark terminals, used in error messages
TERMINAL_DISPLAY = {
    'LPAR': "'('",
    'RPAR': "')'",
    'LSQB': "'['",
    'RSQB': "']'",
    'LBRACE': "'{'",
    'RBRACE': "'}'",
    'COMMA': "','",
    'DOT': "'.'",
    'COLON': "':'",
    'MINUS': "'-'",
    'LESSTHAN': "'<'",
    'MORETHAN': "'>'",
    'VBAR': "'|'",
    'SEMICOLON': "';'",
    'IDENTIFIER': 'identifier',
    'STRING': 'string literal',
    'NUMBER': 'number literal',
    'BOOLEAN': 'boolean literal',
    'NULL': 'null',
    'PARAMETER': 'parameter',
    'OPERATOR': 'operator',
    'MATCH': 'MATCH',
    'CREATE': 'CREATE',
    'WHERE': 'WHERE',
    'RETURN': 'RETURN',
    '$END': 'end of input',
}


@dataclass(frozen=True)
class Token:
    """A single lexical token with its source span"""
    kind: TokenKind
    text: str
    start: int
    end: int
    line: int = 1
    column: int = 1
    terminal: Optional[str] = None

    @classmethod
    def from_lark(cls, token: LarkToken) -> 'Token':
        return cls(
            kind=_KINDS.get(token.type, TokenKind.PUNCTUATION),
            text=str(token),
            start=token.start_pos,
            end=token.end_pos,
            line=token.line,
            column=token.column,
            terminal=token.type,
        )


START_RULES = ['pattern', 'statement']


@lru_cache(maxsize=1)
def read_grammar() -> str:
    with open(GRAMMAR_PATH, 'r') as f:
        return f.read()


@lru_cache(maxsize=1)
def load_grammar() -> Lark:
    """
    Build the Lark parser for grammar.lark

    The instance is shared: Lark parsers keep no state between parses.
    """
    logger.debug(f"Loading Cypher grammar from {GRAMMAR_PATH}")
    return Lark(
        read_grammar(),
        parser='lalr',
        lexer='basic',
        start=START_RULES,
        propagate_positions=True,
    )


@lru_cache(maxsize=1)
def load_lexer() -> Lark:
    """
    Build the lexer-only Lark instance for grammar.lark

    Same terminals and the same basic lexer as load_grammar(), so tokenize()
    yields exactly the tokens the parser consumes. Built once; Lark.lex reuses
    its lexer when no parser is configured.
    """
    return Lark(read_grammar(), parser=None, lexer='basic', start=START_RULES)


def describe_terminal(name: str) -> str:
    return TERMINAL_DISPLAY.get(name, name)


def lex_error(error: UnexpectedCharacters, text: str) -> LexError:
    """Convert a Lark lexer failure into a LexError"""
    position = error.pos_in_stream
    char = text[position] if position < len(text) else ''

    if char in ('"', "'"):
        reason = f"unterminated string literal starting with {char}"
    else:
        reason = f"invalid character {char!r}"

    return LexError(position=position, reason=reason, line=error.line, column=error.column)


def tokenize(text: str) -> Iterator[Token]:
    """
    Tokenize Cypher pattern text

    Args:
        text: Raw pattern text

    Yields:
        Tokens in source order, followed by a single END token

    Raises:
        LexError: On an unterminated string literal or an invalid character
    """
    stream = load_lexer().lex(text)

    try:
        for lark_token in stream:
            yield Token.from_lark(lark_token)
    except UnexpectedCharacters as e:
        raise lex_error(e, text) from e

    yield Token(
        kind=TokenKind.END,
        text='',
        start=len(text),
        end=len(text),
        line=text.count('\n') + 1,
        column=len(text) - text.rfind('\n'),
        terminal='$END',
    )
