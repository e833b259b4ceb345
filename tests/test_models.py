"""Tests for the parsed document accessors."""

from decimal import Decimal

import pytest

from rawini import PropertyNumber, parse


def load(text):
    return parse(text).unwrap()


def test_values_absent_vs_empty():
    c = load("empty=")
    g = c.global_section
    assert g.get_property_values("empty") == [""]
    assert g.get_property_values("missing") == []
    assert "empty" in g
    assert "missing" not in g


def test_properties_lists_unique_names():
    c = load("a=1\nb=2\na=3")
    assert sorted(c.global_section.properties()) == ["a", "b"]
    assert len(c.global_section) == 2


def test_property_number():
    c = load("number=1\nmessage=hello\nmessage=world\nratio=0.25")
    g = c.global_section

    number = g.get_property_number("number")
    assert isinstance(number, PropertyNumber)
    assert number == "1"
    assert number.int() == 1

    assert g.get_property_number("message") == "hello world"
    assert g.get_property_number("ratio").float() == 0.25
    assert g.get_property_number("ratio").decimal() == Decimal("0.25")
    assert g.get_property_number("missing") is None


def test_property_number_conversion_is_left_to_caller():
    c = load("message=hello")
    number = c.global_section.get_property_number("message")
    with pytest.raises(ValueError):
        number.int()


def test_get_section_absent():
    c = load("[a]\nk=v")
    assert c.get_section("b") is None
    assert c.has_section("a")
    assert not c.has_section("b")


def test_section_values_are_read_only():
    c = load("[a]\nk=v")
    section = c.get_section("a")
    assert section["k"] == ("v",)

    values = section.get_property_values("k")
    values.append("tampered")
    assert section.get_property_values("k") == ["v"]


def test_sections_mapping_is_read_only():
    c = load("[a]\n[b]")
    sections = c.sections()
    assert list(sections) == ["a", "b"]
    with pytest.raises(TypeError):
        sections["c"] = sections["a"]


def test_section_names_returns_a_copy():
    c = load("[a]")
    names = c.section_names()
    names.append("b")
    assert c.section_names() == ["a"]


def test_to_dict():
    c = load("top=1\n[s]\nk=a\nk=b")
    assert c.to_dict() == {"": {"top": ["1"]}, "s": {"k": ["a", "b"]}}
