"""
AST Node Classes for Cypher Pattern Representation
Each node represents a component of a parsed pattern
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union


class Direction(Enum):
    """Relationship direction"""
    OUTGOING = ">"
    INCOMING = "<"
    BOTH = "-"


# Base AST Node
class ASTNode:
    """Base class for all AST nodes"""
    pass


# Literals
@dataclass(frozen=True)
class Literal(ASTNode):
    """Base literal value"""
    value: object

    def to_literal_text(self) -> str:
        """Cypher source text that coerces back to this value"""
        raise NotImplementedError()


@dataclass(frozen=True)
class StringLiteral(Literal):
    """String literal"""
    value: str

    def to_literal_text(self) -> str:
        # No escape processing, so pick a quote the value does not contain
        if "'" in self.value and '"' in self.value:
            raise ValueError(f"String contains both quote characters: {self.value!r}")
        quote = '"' if "'" in self.value else "'"
        return f"{quote}{self.value}{quote}"


@dataclass(frozen=True)
class IntegerLiteral(Literal):
    """Integer literal (signed 64-bit)"""
    value: int

    def to_literal_text(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class FloatLiteral(Literal):
    """Float literal"""
    value: float

    def to_literal_text(self) -> str:
        if not math.isfinite(self.value):
            raise ValueError(f"Float has no literal text: {self.value!r}")
        return repr(self.value)


@dataclass(frozen=True)
class BooleanLiteral(Literal):
    """Boolean literal"""
    value: bool

    def to_literal_text(self) -> str:
        return 'true' if self.value else 'false'


@dataclass(frozen=True)
class NullLiteral(Literal):
    """NULL literal"""
    value: None = None

    def to_literal_text(self) -> str:
        return 'null'


@dataclass(frozen=True)
class IdentifierReference(Literal):
    """Bare identifier used as a value, e.g. a reference to another variable"""
    value: str

    @property
    def name(self) -> str:
        return self.value

    def to_literal_text(self) -> str:
        return self.value


@dataclass
class MapLiteral(ASTNode):
    """Map literal {key: value, ...}, in declaration order"""
    items: Dict[str, Literal] = field(default_factory=dict)

    def keys(self) -> List[str]:
        return list(self.items.keys())

    def values(self) -> List[Literal]:
        return list(self.items.values())

    def __len__(self) -> int:
        return len(self.items)


# Pattern Elements
@dataclass
class NodePattern(ASTNode):
    """Node pattern (n:Label {prop: value})"""
    variable: Optional[str] = None
    labels: Tuple[str, ...] = ()
    properties: Optional[MapLiteral] = None
    position: Optional[int] = field(default=None, compare=False)

    @property
    def label(self) -> Optional[str]:
        return self.labels[0] if self.labels else None

    @property
    def has_properties(self) -> bool:
        """True when the pattern carries a non-empty property map"""
        return self.properties is not None and len(self.properties) > 0


@dataclass
class RelationshipPattern(ASTNode):
    """Relationship pattern -[r:TYPE]->"""
    variable: Optional[str] = None
    types: List[str] = field(default_factory=list)
    properties: Optional[MapLiteral] = None
    direction: Direction = Direction.BOTH
    position: Optional[int] = field(default=None, compare=False)


PatternElement = Union[NodePattern, RelationshipPattern]


@dataclass
class PatternPath(ASTNode):
    """Chain of alternating node and relationship elements"""
    elements: List[PatternElement] = field(default_factory=list)

    @property
    def nodes(self) -> List[NodePattern]:
        return [e for e in self.elements if isinstance(e, NodePattern)]

    @property
    def relationships(self) -> List[RelationshipPattern]:
        return [e for e in self.elements if isinstance(e, RelationshipPattern)]


@dataclass
class Pattern(ASTNode):
    """A comma-separated list of paths"""
    paths: List[PatternPath] = field(default_factory=list)


# Helper functions for AST construction
def create_node_pattern(variable: Optional[str] = None,
                        labels: Optional[List[str]] = None,
                        properties: Optional[Dict[str, Literal]] = None) -> NodePattern:
    """Helper to create node pattern"""
    return NodePattern(
        variable=variable,
        labels=tuple(dict.fromkeys(labels or [])),
        properties=MapLiteral(items=dict(properties)) if properties is not None else None,
    )
