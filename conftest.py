import pytest
from css_selector_builder import SelectorBuilder

@pytest.fixture
def builder():
    """Return an instance of the SelectorBuilder class."""
    return SelectorBuilder()

@pytest.fixture
def table_rows(builder):
    """The nested div/table/tr/td expression from the README."""
    return builder.combine(
        builder.element("div").id("main").class_("container").class_("draggable"),
        "+",
        builder.combine(
            builder.element("table").id("data"),
            "~",
            builder.combine(
                builder.element("tr").pseudo_class("nth-of-type(even)"),
                " ",
                builder.element("td").pseudo_class("nth-of-type(even)")
            )
        )
    )
