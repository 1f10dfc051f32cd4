from enum import Enum
from typing import Optional, Tuple, Union
import logging

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import DuplicateFragmentError, OrderViolationError, InvalidCombinatorError
from .fragments import Fragment, FragmentKind

logger = logging.getLogger(__name__)

class Combinator(Enum):
    DESCENDANT = "descendant"
    CHILD = "child"
    NEXT_SIBLING = "next-sibling"
    SUBSEQUENT_SIBLING = "subsequent-sibling"

    @property
    def symbol(self) -> str:
        return _COMBINATOR_SYMBOLS[self]

    @property
    def text(self) -> str:
        """Text placed between the two operands when serialized."""
        if self is Combinator.DESCENDANT:
            return " "
        return f" {self.symbol} "

    @classmethod
    def coerce(cls, value: Union["Combinator", str]) -> "Combinator":
        """
        Resolve a combinator from a member, its name or value, or its CSS symbol.

        Any non-empty run of whitespace means the descendant combinator.

        Raises:
            InvalidCombinatorError: If the value names no known combinator
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value:
            for member in cls:
                if value.strip() == member.symbol.strip() or value in (member.value, member.name):
                    return member
        raise InvalidCombinatorError(f"Unknown combinator: {value!r}")

_COMBINATOR_SYMBOLS = {
    Combinator.DESCENDANT: " ",
    Combinator.CHILD: ">",
    Combinator.NEXT_SIBLING: "+",
    Combinator.SUBSEQUENT_SIBLING: "~",
}

class CompoundSelector(BaseModel):
    """
    A selector for a single element, such as ``div#main.container``.

    Instances are immutable: every append returns a new selector and leaves
    the receiver untouched, so a failed append never corrupts a value that
    is already in use.
    """

    model_config = ConfigDict(frozen=True)

    fragments: Tuple[Fragment, ...] = Field(default=())

    @property
    def last_kind(self) -> Optional[FragmentKind]:
        return self.fragments[-1].kind if self.fragments else None

    def count(self, kind: FragmentKind) -> int:
        return sum(1 for fragment in self.fragments if fragment.kind is kind)

    def append(self, kind: FragmentKind, text: str) -> "CompoundSelector":
        """
        Return a copy of this selector with one more fragment.

        Args:
            kind: Kind of the fragment to add
            text: Raw fragment text, used as given

        Returns:
            New CompoundSelector ending with the fragment

        Raises:
            DuplicateFragmentError: If a singleton kind is already present
            OrderViolationError: If kind sorts before the last appended kind
        """
        kind = FragmentKind(kind)
        if kind.rule.singleton and self.count(kind):
            logger.debug(f"Rejected duplicate {kind.value} fragment {text!r}")
            raise DuplicateFragmentError(kind)

        previous = self.last_kind
        if previous is not None and kind.rule.order < previous.rule.order:
            logger.debug(f"Rejected {kind.value} fragment {text!r} after {previous.value}")
            raise OrderViolationError(kind, previous)

        fragment = Fragment(kind=kind, text=text)
        return CompoundSelector(fragments=self.fragments + (fragment,))

    def element(self, text: str) -> "CompoundSelector":
        return self.append(FragmentKind.ELEMENT, text)

    def id(self, text: str) -> "CompoundSelector":
        return self.append(FragmentKind.ID, text)

    def class_(self, text: str) -> "CompoundSelector":
        return self.append(FragmentKind.CLASS, text)

    def attr(self, text: str) -> "CompoundSelector":
        return self.append(FragmentKind.ATTRIBUTE, text)

    def pseudo_class(self, text: str) -> "CompoundSelector":
        return self.append(FragmentKind.PSEUDO_CLASS, text)

    def pseudo_element(self, text: str) -> "CompoundSelector":
        return self.append(FragmentKind.PSEUDO_ELEMENT, text)

    def serialize(self) -> str:
        return "".join(fragment.render() for fragment in self.fragments)

    def stringify(self) -> str:
        return stringify(self)

    def __str__(self) -> str:
        return self.serialize()

class CombinatorNode(BaseModel):
    """Two selector expressions joined by a combinator."""

    model_config = ConfigDict(frozen=True)

    left: Union[CompoundSelector, "CombinatorNode"]
    operator: Combinator
    right: Union[CompoundSelector, "CombinatorNode"]

    def stringify(self) -> str:
        return stringify(self)

    def __str__(self) -> str:
        return stringify(self)

CombinatorNode.model_rebuild()

SelectorExpr = Union[CompoundSelector, CombinatorNode]

def combine(
    left: SelectorExpr,
    operator: Union[Combinator, str],
    right: SelectorExpr
) -> CombinatorNode:
    """Join two selector expressions; the operands are shared, not copied."""
    return CombinatorNode(left=left, operator=Combinator.coerce(operator), right=right)

def stringify(expr: SelectorExpr) -> str:
    """
    Serialize a selector expression to CSS.

    The tree is walked depth-first, left to right, exactly as it was built.

    Args:
        expr: CompoundSelector or CombinatorNode

    Returns:
        The CSS selector string
    """
    if isinstance(expr, CompoundSelector):
        return expr.serialize()
    if isinstance(expr, CombinatorNode):
        return stringify(expr.left) + expr.operator.text + stringify(expr.right)
    raise TypeError(f"Not a selector expression: {type(expr).__name__}")
