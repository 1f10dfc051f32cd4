from dataclasses import dataclass
import logging

import cssselect

from .exceptions import InvalidSelectorError
from .selectors import SelectorExpr, stringify
from .utils import has_parse_errors, iter_compounds

logger = logging.getLogger(__name__)

@dataclass
class SelectorInfo:
    selector: str
    is_valid: bool
    validation_message: str = ""
    compound_count: int = 0

class SelectorValidator:
    """Checks that a built selector serializes to CSS that parsers accept."""

    def validate(self, expr: SelectorExpr) -> SelectorInfo:
        """Serialize an expression and report whether the result is valid CSS."""
        selector = stringify(expr)
        compounds = list(iter_compounds(expr))
        compound_count = len(compounds)

        if not selector:
            return SelectorInfo(
                selector=selector,
                is_valid=False,
                validation_message="Empty selector",
                compound_count=compound_count
            )

        if any(not compound.fragments for compound in compounds):
            logger.debug(f"Empty compound selector inside: {selector!r}")
            return SelectorInfo(
                selector=selector,
                is_valid=False,
                validation_message="Empty compound selector in combination",
                compound_count=compound_count
            )

        if has_parse_errors(selector):
            logger.debug(f"Tokenizer errors in selector: {selector}")
            return SelectorInfo(
                selector=selector,
                is_valid=False,
                validation_message="Selector contains unbalanced or malformed tokens",
                compound_count=compound_count
            )

        try:
            cssselect.parse(selector)
        except cssselect.SelectorError as e:
            logger.debug(f"Selector rejected by cssselect: {selector}: {str(e)}")
            return SelectorInfo(
                selector=selector,
                is_valid=False,
                validation_message=f"Invalid CSS selector: {str(e)}",
                compound_count=compound_count
            )

        return SelectorInfo(
            selector=selector,
            is_valid=True,
            compound_count=compound_count
        )

    def check(self, expr: SelectorExpr) -> str:
        """
        Serialize an expression, insisting that the result is valid CSS.

        Raises:
            InvalidSelectorError: If the serialized selector does not parse
        """
        info = self.validate(expr)
        if not info.is_valid:
            raise InvalidSelectorError(info.validation_message)
        return info.selector
