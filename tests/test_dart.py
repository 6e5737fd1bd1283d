"""Tests for the Dart fragment tree and formatter."""

from __future__ import annotations

from resgen.dart import DartClass, DartField, DartFormatter, DartMethod, dart_string, dart_string_map


def test_dart_string_escapes_special_characters() -> None:
    assert dart_string("images/icon.png") == "'images/icon.png'"
    assert dart_string("it's") == "'it\\'s'"
    assert dart_string("costs $5") == "'costs \\$5'"
    assert dart_string("a\\b") == "'a\\\\b'"
    assert dart_string("line\nbreak") == "'line\\nbreak'"
    assert dart_string("\x01") == "'\\u{1}'"


def test_dart_string_map_sorts_entries() -> None:
    assert dart_string_map({"b": "2", "a": "1"}) == "{\n  'a': '1',\n  'b': '2',\n}"
    assert dart_string_map({}) == "<String, String>{}"


def test_format_empty_class_keeps_constructor() -> None:
    source = DartFormatter().format_class(DartClass(name="SvgAssets", constructor="const SvgAssets();"))

    assert source == "class SvgAssets {\n  const SvgAssets();\n}"


def test_format_class_orders_constructor_fields_methods() -> None:
    dart_class = DartClass(
        name="Example",
        constructor="const Example();",
        fields=[
            DartField(name="icon", type="String", value="'a.png'"),
            DartField(name="count", type="int"),
        ],
        methods=[
            DartMethod(signature="String get label", expression="'x'"),
            DartMethod(signature="void run()", statements=["if (true) {", "  return;", "}"]),
        ],
    )

    source = DartFormatter().format_class(dart_class)

    assert source == (
        "class Example {\n"
        "  const Example();\n"
        "\n"
        "  final String icon = 'a.png';\n"
        "  final int count;\n"
        "\n"
        "  String get label => 'x';\n"
        "\n"
        "  void run() {\n"
        "    if (true) {\n"
        "      return;\n"
        "    }\n"
        "  }\n"
        "}"
    )


def test_format_multiline_field_is_surrounded_by_blank_lines() -> None:
    dart_class = DartClass(
        name="Holder",
        fields=[
            DartField(name="a", type="int", value="1"),
            DartField(name="map", value="{\n  'k': 'v',\n}", modifier="static const"),
            DartField(name="b", type="int", value="2"),
        ],
    )

    lines = DartFormatter().format_class(dart_class).split("\n")

    assert lines == [
        "class Holder {",
        "  final int a = 1;",
        "",
        "  static const map = {",
        "    'k': 'v',",
        "  };",
        "",
        "  final int b = 2;",
        "}",
    ]


def test_format_classes_separates_with_blank_line() -> None:
    formatter = DartFormatter()
    source = formatter.format_classes([DartClass(name="A"), DartClass(name="B")])

    assert source == "class A {\n}\n\nclass B {\n}"
