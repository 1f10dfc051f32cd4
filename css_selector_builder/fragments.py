from enum import Enum
from typing import Dict
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

class FragmentKind(Enum):
    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudoClass"
    PSEUDO_ELEMENT = "pseudoElement"

    @property
    def rule(self) -> "FragmentRule":
        return FRAGMENT_RULES[self]

@dataclass(frozen=True)
class FragmentRule:
    order: int
    prefix: str = ""
    suffix: str = ""
    singleton: bool = False

# Canonical order and cardinality of fragments inside one compound selector.
FRAGMENT_RULES: Dict[FragmentKind, FragmentRule] = {
    FragmentKind.ELEMENT: FragmentRule(order=0, singleton=True),
    FragmentKind.ID: FragmentRule(order=1, prefix="#", singleton=True),
    FragmentKind.CLASS: FragmentRule(order=2, prefix="."),
    FragmentKind.ATTRIBUTE: FragmentRule(order=3, prefix="[", suffix="]"),
    FragmentKind.PSEUDO_CLASS: FragmentRule(order=4, prefix=":"),
    FragmentKind.PSEUDO_ELEMENT: FragmentRule(order=5, prefix="::", singleton=True),
}

class Fragment(BaseModel):
    """One typed piece of a compound selector, e.g. the ``#main`` of ``div#main``."""

    model_config = ConfigDict(frozen=True)

    kind: FragmentKind
    text: str

    def render(self) -> str:
        rule = self.kind.rule
        return f"{rule.prefix}{self.text}{rule.suffix}"
