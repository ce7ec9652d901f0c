"""Tests for typed property values and entities."""

import pytest

from bimprops.models import (
    DoubleValue,
    EnumerationValue,
    FamilyManifest,
    FamilyView,
    OptionGroup,
    OptionProperty,
    OptionValueType,
    ResolvedFamily,
    StringValue,
    make_value,
    parse_value_type,
)


class TestParseValueType:
    """Tests for matching ValueType spellings."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("String", OptionValueType.STRING),
            ("STRING", OptionValueType.STRING),
            ("строка", OptionValueType.STRING),
            ("Double", OptionValueType.DOUBLE),
            ("number", OptionValueType.DOUBLE),
            ("Число", OptionValueType.DOUBLE),
            ("Enumeration", OptionValueType.ENUMERATION),
            ("enum", OptionValueType.ENUMERATION),
            ("Перечисление", OptionValueType.ENUMERATION),
            ("  double  ", OptionValueType.DOUBLE),
        ],
    )
    def test_known_spellings(self, text, expected):
        assert parse_value_type(text) is expected

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_absent_means_string(self, text):
        assert parse_value_type(text) is OptionValueType.STRING

    def test_unknown_spelling(self):
        assert parse_value_type("Boolean") is None


class TestValueVariants:
    """Tests for value invariants and display."""

    def test_string_allows_empty(self):
        assert StringValue("").is_valid()
        assert StringValue("").display() == ""

    def test_string_rejects_none(self):
        assert not StringValue(None).is_valid()

    def test_enumeration_allows_empty(self):
        assert EnumerationValue("").is_valid()

    def test_enumeration_rejects_none(self):
        assert not EnumerationValue(None).is_valid()
        assert EnumerationValue(None).display() == ""

    def test_double_requires_number(self):
        assert DoubleValue(0.0).is_valid()
        assert not DoubleValue(None).is_valid()

    def test_double_display(self):
        assert DoubleValue(123.45).display() == "123.45"
        assert DoubleValue(None).display() == ""

    def test_values_are_immutable(self):
        value = StringValue("Steel")
        with pytest.raises(Exception):
            value.text = "Oak"

    def test_kind(self):
        assert StringValue().kind is OptionValueType.STRING
        assert DoubleValue().kind is OptionValueType.DOUBLE
        assert EnumerationValue().kind is OptionValueType.ENUMERATION


class TestMakeValue:
    def test_double(self):
        assert make_value(OptionValueType.DOUBLE, 2) == DoubleValue(2.0)

    def test_string(self):
        assert make_value(OptionValueType.STRING, "Oak") == StringValue("Oak")

    def test_enumeration(self):
        assert make_value(OptionValueType.ENUMERATION, "Matte") == EnumerationValue("Matte")


class TestEntities:
    """Tests for entity helpers."""

    def test_property_exposes_type_and_display(self):
        prop = OptionProperty(id="p1", name="Width", value=DoubleValue(5))
        assert prop.value_type is OptionValueType.DOUBLE
        assert prop.display_value == "5.00"
        assert prop.is_valid()

    def test_property_defaults_to_empty_string(self):
        prop = OptionProperty(id="p1", name="Note")
        assert prop.value_type is OptionValueType.STRING
        assert prop.category_name == ""
        assert prop.description is None
        assert prop.is_valid()

    def test_group_find_property(self):
        group = OptionGroup(id="g1", properties=[OptionProperty(id="p1", name="A")])
        assert group.find_property("p1").name == "A"
        assert group.find_property("p2") is None

    def test_missing_group_ids(self):
        manifest = FamilyManifest(id="f1", name="Door", option_group_ids=["g1", "g2"])
        resolved = ResolvedFamily(manifest=manifest, option_groups={"g1": OptionGroup(id="g1")})
        assert resolved.missing_group_ids == ["g2"]

    def test_family_view_property_count(self):
        manifest = FamilyManifest(id="f1", name="Door")
        family_view = FamilyView(
            manifest=manifest,
            categories={
                "A": [OptionProperty(id="p1", name="x"), OptionProperty(id="p2", name="y")],
                "B": [OptionProperty(id="p3", name="z")],
            },
        )
        assert family_view.property_count == 3
