from typing import Optional, Union

from .fragments import FragmentKind
from .selectors import (
    Combinator,
    CombinatorNode,
    CompoundSelector,
    SelectorExpr,
    combine,
    stringify
)
from .validators import SelectorInfo, SelectorValidator

class SelectorBuilder:
    """
    Entry point for building CSS selectors.

    The builder keeps no selector state of its own; every call returns a new
    value, so one instance can be shared freely.

    Example:
        >>> b = SelectorBuilder()
        >>> b.stringify(b.combine(b.element("ul"), ">", b.element("li").class_("active")))
        'ul > li.active'
    """

    def __init__(self, validator: Optional[SelectorValidator] = None):
        self.validator = validator or SelectorValidator()

    def _start(self, kind: FragmentKind, text: str) -> CompoundSelector:
        return CompoundSelector().append(kind, text)

    def element(self, text: str) -> CompoundSelector:
        """Start a compound selector with a type selector, e.g. ``div``."""
        return self._start(FragmentKind.ELEMENT, text)

    def id(self, text: str) -> CompoundSelector:
        """Start a compound selector with an id, e.g. ``#main``."""
        return self._start(FragmentKind.ID, text)

    def class_(self, text: str) -> CompoundSelector:
        """Start a compound selector with a class, e.g. ``.container``."""
        return self._start(FragmentKind.CLASS, text)

    def attr(self, text: str) -> CompoundSelector:
        """Start a compound selector with an attribute, e.g. ``[href]``."""
        return self._start(FragmentKind.ATTRIBUTE, text)

    def pseudo_class(self, text: str) -> CompoundSelector:
        """Start a compound selector with a pseudo-class, e.g. ``:hover``."""
        return self._start(FragmentKind.PSEUDO_CLASS, text)

    def pseudo_element(self, text: str) -> CompoundSelector:
        """Start a compound selector with a pseudo-element, e.g. ``::before``."""
        return self._start(FragmentKind.PSEUDO_ELEMENT, text)

    def combine(
        self,
        left: SelectorExpr,
        operator: Union[Combinator, str],
        right: SelectorExpr
    ) -> CombinatorNode:
        """Join two selector expressions with a combinator (member or CSS symbol)."""
        return combine(left, operator, right)

    def stringify(self, expr: SelectorExpr) -> str:
        """Serialize a selector expression to CSS. Pure; safe to call repeatedly."""
        return stringify(expr)

    def validate(self, expr: SelectorExpr) -> SelectorInfo:
        """Check the serialized expression with the configured validator."""
        return self.validator.validate(expr)

css_selector_builder = SelectorBuilder()
