"""
Cypher Pattern Parser using Lark
Transforms node patterns into AST
"""

import logging
from dataclasses import dataclass
from typing import Optional

from lark import Transformer, Tree, v_args
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken, VisitError

from ..errors import CypherTranslationError, ParseError, UnsupportedConstruct
from .ast_nodes import *
from .coercion import coerce_literal
from .tokenizer import Token, describe_terminal, lex_error, load_grammar

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Variable:
    """Pattern variable as seen by the transformer"""
    name: str


class CypherTransformer(Transformer):
    """Transforms Lark parse tree into AST nodes"""

    # Patterns
    def pattern(self, items):
        return Pattern(paths=items)

    def path(self, items):
        return PatternPath(elements=items)

    @v_args(meta=True)
    def node_pattern(self, meta, items):
        variable = None
        labels = ()
        properties = None

        for item in items:
            if isinstance(item, Variable):
                variable = item.name
            elif isinstance(item, tuple):
                labels = item
            elif isinstance(item, MapLiteral):
                properties = item

        return NodePattern(variable=variable, labels=labels, properties=properties,
                           position=getattr(meta, 'start_pos', None))

    def variable(self, items):
        return Variable(name=str(items[0]))

    def label_list(self, items):
        # Ordered set: duplicates collapse, first occurrence wins
        return tuple(dict.fromkeys(str(label) for label in items))

    # Properties
    def properties(self, items):
        if not items:
            return MapLiteral(items={})
        return items[0]

    def property_list(self, items):
        props = {}
        for key, value in items:
            if key in props:
                raise ParseError(
                    expected='unique property key',
                    found=f"duplicate key {str(key)!r}",
                    position=key.start_pos,
                )
            props[str(key)] = value
        return MapLiteral(items=props)

    def property(self, items):
        return (items[0], items[1])

    def value(self, items):
        token = items[0]
        literal = coerce_literal(Token.from_lark(token))
        if token.type == 'NUMBER' and isinstance(literal, IdentifierReference):
            # Lexes as a number but overflows a double
            raise ParseError(
                expected='finite number literal',
                found=repr(str(token)),
                position=token.start_pos,
            )
        return literal

    # Relationships
    def left_arrow(self, items):
        return Direction.INCOMING

    def right_arrow(self, items):
        return Direction.OUTGOING

    @v_args(meta=True)
    def relationship_pattern(self, meta, items):
        variable = None
        types = []
        properties = None

        has_left = Direction.INCOMING in items
        has_right = Direction.OUTGOING in items

        for item in items:
            if isinstance(item, dict):
                variable = item.get('variable')
                types = item.get('types', [])
                properties = item.get('properties')

        direction = Direction.BOTH
        if has_left and not has_right:
            direction = Direction.INCOMING
        elif has_right and not has_left:
            direction = Direction.OUTGOING

        return RelationshipPattern(
            variable=variable,
            types=types,
            properties=properties,
            direction=direction,
            position=getattr(meta, 'start_pos', None),
        )

    def relationship_detail(self, items):
        result = {'variable': None, 'types': [], 'properties': None}

        for item in items:
            if isinstance(item, Variable):
                result['variable'] = item.name
            elif isinstance(item, list):
                result['types'] = item
            elif isinstance(item, MapLiteral):
                result['properties'] = item

        return result

    def relationship_types(self, items):
        return [str(item) for item in items]


def parse_error(error: UnexpectedToken, text: str) -> ParseError:
    """Convert a Lark parser failure into a ParseError"""
    token = error.token
    expected = [describe_terminal(name) for name in error.expected]

    if token.type == '$END':
        found = 'end of input'
        position = len(text)
    else:
        found = f"{describe_terminal(token.type)} {str(token)!r}"
        position = token.start_pos

    return ParseError(expected=expected, found=found, position=position)


def translate_lark_error(error: Exception, text: str) -> CypherTranslationError:
    """Map any Lark failure onto the translation error hierarchy"""
    if isinstance(error, UnexpectedCharacters):
        return lex_error(error, text)
    if isinstance(error, UnexpectedToken):
        return parse_error(error, text)
    return ParseError(expected='valid Cypher', found=str(error).strip(),
                      position=getattr(error, 'pos_in_stream', None))


class CypherParser:
    """Main Cypher pattern parser class"""

    def __init__(self):
        self.parser = load_grammar()

    def parse_tree(self, text: str, start: str) -> Tree:
        """Parse text into a raw Lark tree for the given start rule"""
        try:
            return self.parser.parse(text, start=start)
        except UnexpectedInput as e:
            raise translate_lark_error(e, text) from e

    def transform(self, tree: Tree, text: str, transformer: Optional[Transformer] = None):
        transformer = transformer or CypherTransformer()
        try:
            return transformer.transform(tree)
        except VisitError as e:
            if isinstance(e.orig_exc, CypherTranslationError):
                raise e.orig_exc from e
            raise

    def parse_pattern(self, text: str) -> Pattern:
        """
        Parse pattern text into a Pattern AST

        Args:
            text: Pattern text such as "(n:Person {name: 'Alice'})"

        Returns:
            Pattern AST node

        Raises:
            LexError: On malformed tokens
            ParseError: When the text violates the pattern grammar
        """
        tree = self.parse_tree(text, start='pattern')
        return self.transform(tree, text)

    def parse_node_pattern(self, text: str) -> NodePattern:
        """
        Parse text that must hold exactly one node pattern

        Raises:
            UnsupportedConstruct: For relationships or multiple nodes
        """
        pattern = self.parse_pattern(text)
        return single_node(pattern)


def single_node(pattern: Pattern) -> NodePattern:
    """Return the only node of a pattern, rejecting anything larger"""
    if len(pattern.paths) > 1:
        logger.warning(f"Rejecting pattern with {len(pattern.paths)} comma-separated paths")
        raise UnsupportedConstruct('multiple node patterns',
                                   position=pattern.paths[1].elements[0].position)

    path = pattern.paths[0]
    if path.relationships:
        relationship = path.relationships[0]
        logger.warning("Rejecting pattern with relationship edges")
        raise UnsupportedConstruct('relationship pattern', position=relationship.position)

    return path.nodes[0]


def parse_pattern(text: str) -> Pattern:
    """Parse pattern text into a Pattern AST"""
    return CypherParser().parse_pattern(text)


def parse_node_pattern(text: str) -> NodePattern:
    """Parse text holding exactly one node pattern"""
    return CypherParser().parse_node_pattern(text)
