class SelectorBuildError(Exception):
    """Base error for invalid selector construction."""
    pass

class DuplicateFragmentError(SelectorBuildError):
    """A singleton fragment kind was appended twice to one compound."""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(
            f"Element, id and pseudo-element should not occur more than one time "
            f"inside the selector (duplicate {kind.value})"
        )

class OrderViolationError(SelectorBuildError):
    """A fragment was appended out of canonical order."""

    def __init__(self, attempted, previous):
        self.attempted = attempted
        self.previous = previous
        super().__init__(
            "Selector parts should be arranged in the following order: element, id, "
            "class, attribute, pseudo-class, pseudo-element "
            f"({attempted.value} after {previous.value})"
        )

class InvalidCombinatorError(SelectorBuildError, ValueError):
    """Unknown combinator operator."""
    pass

class ValidationError(Exception):
    """Base validation error."""
    pass

class InvalidSelectorError(ValidationError):
    """Serialized selector is not valid CSS."""
    pass
