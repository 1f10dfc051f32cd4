# css_selector_builder/__init__.py
from .fragments import FragmentKind, Fragment, FragmentRule, FRAGMENT_RULES
from .selectors import (
    Combinator,
    CompoundSelector,
    CombinatorNode,
    SelectorExpr,
    combine,
    stringify
)
from .builder import SelectorBuilder, css_selector_builder
from .validators import SelectorValidator, SelectorInfo
from .exceptions import (
    SelectorBuildError,
    DuplicateFragmentError,
    OrderViolationError,
    InvalidCombinatorError,
    ValidationError,
    InvalidSelectorError
)
from .utils import (
    iter_compounds,
    selector_tokens,
    is_equivalent_selector,
    has_parse_errors
)

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "SelectorBuilder",
    "CompoundSelector",
    "CombinatorNode",
    "Combinator",
    "FragmentKind",
    "Fragment",
    "FragmentRule",
    "FRAGMENT_RULES",
    "SelectorExpr",
    "SelectorValidator",
    "SelectorInfo",
    "css_selector_builder",
    "combine",
    "stringify",

    # Exceptions
    "SelectorBuildError",
    "DuplicateFragmentError",
    "OrderViolationError",
    "InvalidCombinatorError",
    "ValidationError",
    "InvalidSelectorError",

    # Utility functions
    "iter_compounds",
    "selector_tokens",
    "is_equivalent_selector",
    "has_parse_errors"
]
