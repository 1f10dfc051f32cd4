from typing import Iterator, List

import tinycss2

from .selectors import CombinatorNode, CompoundSelector, SelectorExpr

# Whitespace around these is not a descendant combinator
EXPLICIT_COMBINATORS = {">", "+", "~", ","}

def iter_compounds(expr: SelectorExpr) -> Iterator[CompoundSelector]:
    """Yield the compound selectors of an expression tree, left to right."""
    if isinstance(expr, CombinatorNode):
        yield from iter_compounds(expr.left)
        yield from iter_compounds(expr.right)
    else:
        yield expr

def selector_tokens(selector: str) -> List[str]:
    """
    Tokenize a selector string with tinycss2.

    Args:
        selector: CSS selector string

    Returns:
        Serialized tokens. Each whitespace run becomes a single " "
        (the descendant combinator), dropped at either end and next to
        an explicit combinator.
    """
    parts = [
        " " if token.type == "whitespace" else token.serialize()
        for token in tinycss2.parse_component_value_list(selector)
    ]
    tokens = []
    for i, part in enumerate(parts):
        if part == " ":
            previous = parts[i - 1] if i > 0 else None
            following = parts[i + 1] if i + 1 < len(parts) else None
            if previous is None or following is None:
                continue
            if previous in EXPLICIT_COMBINATORS or following in EXPLICIT_COMBINATORS:
                continue
        tokens.append(part)
    return tokens

def is_equivalent_selector(actual: str, expected: str) -> bool:
    """Compare two selector strings token by token, ignoring insignificant whitespace."""
    return selector_tokens(actual) == selector_tokens(expected)

def has_parse_errors(selector: str) -> bool:
    """Check whether tinycss2 reports errors anywhere in the selector, nested blocks included."""
    return _contains_error(tinycss2.parse_component_value_list(selector))

def _contains_error(tokens) -> bool:
    for token in tokens:
        if token.type == "error":
            return True
        # Blocks keep their children in .content, functions in .arguments
        children = getattr(token, "content", None)
        if children is None:
            children = getattr(token, "arguments", None)
        if isinstance(children, list) and _contains_error(children):
            return True
    return False
