"""Tests for property extraction and class location."""

from pathlib import Path

import pytest

from ctorgen.csharp.locator import ClassLocation, class_body, locate_class
from ctorgen.csharp.properties import PropertyDescriptor, extract_properties
from ctorgen.errors import NoClassDeclarationFound

FIXTURES = Path(__file__).parent / "fixtures"


def _pairs(props):
    return [(p.type, p.name) for p in props]


class TestExtractProperties:
    def test_source_order(self, person_text):
        props = extract_properties(person_text)
        assert _pairs(props) == [("string", "Name"), ("int", "Age")]

    def test_skips_fields_and_expression_bodies(self, person_text):
        names = [p.name for p in extract_properties(person_text)]
        assert "_secret" not in names
        assert "DoubleAge" not in names

    def test_non_public_ignored(self):
        text = "    internal int A { get; set; }\n    protected int B { get; }\n"
        assert extract_properties(text) == []

    def test_no_matches_returns_empty(self):
        assert extract_properties("") == []
        assert extract_properties((FIXTURES / "no_class.cs").read_text()) == []

    def test_repeated_extraction_identical(self, person_text):
        assert extract_properties(person_text) == extract_properties(person_text)

    def test_duplicates_kept(self):
        text = (
            "    public int Id { get; set; }\n"
            "    public long Id { get; set; }\n"
        )
        assert _pairs(extract_properties(text)) == [("int", "Id"), ("long", "Id")]

    def test_compound_type_tokens(self):
        props = extract_properties((FIXTURES / "multi_class.cs").read_text())
        assert _pairs(props) == [
            ("string", "Street"),
            ("Guid", "Id"),
            ("List<string>", "Tags"),
            ("int?", "Rating"),
        ]

    def test_tight_and_allman_accessors(self):
        text = (
            "    public string[] Names {get;set;}\n"
            "    public decimal Total\n"
            "    {\n"
            "        get;\n"
            "    }\n"
        )
        assert _pairs(extract_properties(text)) == [
            ("string[]", "Names"),
            ("decimal", "Total"),
        ]

    def test_setter_only_not_matched(self):
        assert extract_properties("    public int X { set; }\n") == []

    def test_getter_prefix_word_not_matched(self):
        assert extract_properties("    public int X { getter; }\n") == []


class TestParameterName:
    @pytest.mark.parametrize("name,expected", [
        ("FirstName", "firstName"),
        ("ID", "iD"),
        ("X", "x"),
        ("already", "already"),
        ("", ""),
    ])
    def test_first_character_lowered(self, name, expected):
        assert PropertyDescriptor(type="int", name=name).parameter_name == expected

    def test_descriptor_is_frozen(self):
        prop = PropertyDescriptor(type="int", name="Age")
        with pytest.raises(AttributeError):
            prop.name = "Other"


class TestLocateClass:
    def test_same_line_brace(self):
        text = "public class Foo {\n    public int X { get; set; }\n}\n"
        loc = locate_class(text)
        assert loc == ClassLocation(class_name="Foo", insert_offset=19)
        assert text[loc.insert_offset:].startswith("    public int X")

    def test_offset_points_past_declaration_line(self, person_text):
        loc = locate_class(person_text)
        decl = "    public class Person {\n"
        assert loc.class_name == "Person"
        assert loc.insert_offset == person_text.index(decl) + len(decl)

    def test_crlf_offset_is_normalized(self, person_text):
        crlf = person_text.replace("\n", "\r\n")
        assert locate_class(crlf) == locate_class(person_text)

    def test_allman_brace(self):
        text = "namespace A\n{\n    public class Foo\n    {\n        public int X { get; }\n"
        loc = locate_class(text)
        assert loc.class_name == "Foo"
        assert text[loc.insert_offset:].startswith("        public int X")

    def test_modifiers_and_base_list(self):
        text = "    public sealed partial class Bar : Base, IThing\n    {\n    }\n"
        loc = locate_class(text)
        assert loc.class_name == "Bar"
        assert text[loc.insert_offset:] == "    }\n"

    def test_first_class_wins(self):
        loc = locate_class((FIXTURES / "multi_class.cs").read_text())
        assert loc.class_name == "Address"

    def test_select_by_name(self):
        text = (FIXTURES / "multi_class.cs").read_text()
        loc = locate_class(text, class_name="Customer")
        assert loc.class_name == "Customer"
        assert text[loc.insert_offset:].startswith("        public Guid Id")

    def test_trailing_text_on_brace_line(self):
        text = "public class Foo { // model\n    public int X { get; }\n"
        loc = locate_class(text)
        assert loc.insert_offset == text.index("{") + 1

    def test_one_line_class_inserts_after_brace(self):
        text = "public class Foo { public int X { get; set; } }\n"
        loc = locate_class(text)
        assert loc.insert_offset == text.index("{") + 1
        assert text[loc.insert_offset:] == " public int X { get; set; } }\n"

    def test_blank_rest_of_brace_line(self):
        text = "public class Foo {   \n    public int X { get; }\n"
        loc = locate_class(text)
        assert text[loc.insert_offset:].startswith("    public int X")

    def test_brace_at_end_of_text(self):
        text = "public class Foo {"
        assert locate_class(text).insert_offset == len(text)

    def test_non_public_class_ignored(self):
        with pytest.raises(NoClassDeclarationFound):
            locate_class("internal class Hidden {\n}\n")

    def test_missing_class_raises(self):
        text = (FIXTURES / "no_class.cs").read_text()
        with pytest.raises(NoClassDeclarationFound) as exc_info:
            locate_class(text)
        assert exc_info.value.class_name is None
        assert isinstance(exc_info.value, LookupError)

    def test_missing_named_class_raises(self, person_text):
        with pytest.raises(NoClassDeclarationFound, match="Ghost") as exc_info:
            locate_class(person_text, class_name="Ghost")
        assert exc_info.value.class_name == "Ghost"


class TestClassBody:
    def test_body_of_named_class(self):
        text = (FIXTURES / "multi_class.cs").read_text()
        body = class_body(text, "Address")
        assert "Street" in body
        assert "Customer" not in body

    def test_nested_braces_balanced(self):
        text = "public class Foo {\n    public int X { get; set; }\n}\npublic class Bar {\n}\n"
        assert class_body(text) == "\n    public int X { get; set; }\n"

    def test_crlf_normalized(self):
        text = "public class Foo {\r\n    public int X { get; }\r\n}\r\n"
        assert class_body(text) == "\n    public int X { get; }\n"

    def test_unbalanced_runs_to_end(self):
        assert class_body("public class Foo {\n    public int X { get; }\n") == (
            "\n    public int X { get; }\n"
        )

    def test_missing_class_raises(self, person_text):
        with pytest.raises(NoClassDeclarationFound):
            class_body(person_text, "Ghost")
