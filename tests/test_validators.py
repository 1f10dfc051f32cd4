import pytest
from css_selector_builder import (
    SelectorValidator,
    SelectorInfo,
    CompoundSelector,
    InvalidSelectorError,
    ValidationError
)

def test_validate_compound(builder):
    info = builder.validate(builder.element("a").attr('href$=".png"').pseudo_class("focus"))
    assert isinstance(info, SelectorInfo)
    assert info.is_valid is True
    assert info.selector == 'a[href$=".png"]:focus'
    assert info.compound_count == 1

def test_validate_combined_tree(builder, table_rows):
    info = builder.validate(table_rows)
    assert info.is_valid is True
    assert info.compound_count == 4

def test_validate_pseudo_element(builder):
    info = builder.validate(builder.element("p").pseudo_element("first-line"))
    assert info.is_valid is True

def test_invalid_attribute_text(builder):
    info = builder.validate(builder.element("div").attr("=oops"))
    assert info.is_valid is False
    assert info.validation_message.startswith("Invalid CSS selector")

def test_tokenizer_errors(builder):
    info = builder.validate(builder.element("div").pseudo_class("not(a))"))
    assert info.is_valid is False
    assert "malformed" in info.validation_message

def test_empty_compound():
    info = SelectorValidator().validate(CompoundSelector())
    assert info.is_valid is False
    assert info.validation_message == "Empty selector"

def test_check_returns_selector(builder):
    validator = SelectorValidator()
    assert validator.check(builder.id("main").class_("wide")) == "#main.wide"

def test_check_raises(builder):
    validator = SelectorValidator()
    with pytest.raises(InvalidSelectorError, match="Invalid CSS selector"):
        validator.check(builder.element("div").attr("=oops"))

def test_invalid_selector_is_validation_error():
    assert issubclass(InvalidSelectorError, ValidationError)

def test_empty_compound_inside_tree(builder):
    tree = builder.combine(builder.element("a"), " ", CompoundSelector())
    info = SelectorValidator().validate(tree)
    assert info.is_valid is False
    assert info.validation_message == "Empty compound selector in combination"
    assert info.compound_count == 2
    with pytest.raises(InvalidSelectorError):
        SelectorValidator().check(builder.combine(CompoundSelector(), ">", tree))
