"""
Translation requests
A request carries one parsed statement into the clause translator
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

import sqlglot.expressions as exp

from .cypher.ast_nodes import NodePattern


@dataclass
class MatchRequest:
    """MATCH <pattern> [WHERE <where>] RETURN <return_items>"""
    pattern: NodePattern
    where: Optional[exp.Expression] = None
    return_items: List[exp.Expression] = field(default_factory=list)


@dataclass
class CreateRequest:
    """CREATE <pattern>"""
    pattern: NodePattern


TranslationRequest = Union[MatchRequest, CreateRequest]
