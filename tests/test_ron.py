"""
RON codec tests.

Tests cover:
- Reading the syntax forms LeftWM configs use
- Syntax error positions
- Writer layout (header, indentation, inline nesting)
"""

import math
from enum import Enum

import pytest

from leftwm_config.config import ron
from leftwm_config.errors import ErrorCode, RonSyntaxError


class Color(str, Enum):
    RED = "Red"


class TestParseDocument:
    """Test parsing of whole documents."""

    def test_sample_config(self, sample_ron):
        data = ron.loads(sample_ron)

        assert data["modkey"] == "Mod1"
        assert data["mousekey"] == "Mod4"
        assert data["tags"] == ["web", "code", "chat"]
        assert data["max_window_width"] == 0.75
        assert data["layouts"] == ["MainAndVertStack", "Monocle"]
        assert data["layout_mode"] == "Workspace"
        assert [w["id"] for w in data["workspaces"]] == [1, 2]
        assert data["disable_current_tag_swap"] is True
        assert data["keybind"][2] == {
            "command": "CloseWindow",
            "value": "",
            "modifier": ["modkey", "Shift"],
            "key": "q",
        }

    def test_extensions_are_recorded(self):
        parser = ron.RonParser("#![enable(implicit_some, unwrap_newtypes)]\n(a: 1)")

        assert parser.parse_document() == {"a": 1}
        assert parser.extensions == ["implicit_some", "unwrap_newtypes"]

    def test_comments(self):
        text = """
        // line comment
        (
            a: 1, // trailing
            /* block /* nested */ still comment */
            b: 2,
        )
        """
        assert ron.loads(text) == {"a": 1, "b": 2}

    def test_named_struct(self):
        assert ron.loads("Config(a: 1)") == {"a": 1}

    def test_empty_struct_and_unit(self):
        assert ron.loads("()") is None
        assert ron.loads("[]") == []
        assert ron.loads("{}") == {}


class TestParseValues:
    """Test parsing of individual values."""

    @pytest.mark.parametrize("text,expected", [
        ("42", 42),
        ("-7", -7),
        ("+3", 3),
        ("1_000", 1000),
        ("0x1F", 31),
        ("0b101", 5),
        ("0o17", 15),
        ("1.5", 1.5),
        ("-0.25", -0.25),
        ("1e3", 1000.0),
        (".5", 0.5),
    ])
    def test_numbers(self, text, expected):
        value = ron.loads(text)
        assert value == expected
        assert type(value) is type(expected)

    def test_special_floats(self):
        assert ron.loads("inf") == math.inf
        assert ron.loads("-inf") == -math.inf
        assert math.isnan(ron.loads("NaN"))

    def test_booleans_and_none(self):
        assert ron.loads("[true, false, None]") == [True, False, None]

    def test_some_is_unwrapped(self):
        assert ron.loads('Some("x")') == "x"
        assert ron.loads("Some(Some(1))") == 1

    def test_string_escapes(self):
        assert ron.loads(r'"a\"b\\c\nd\te"') == 'a"b\\c\nd\te'
        assert ron.loads(r'"\x41\u{1F600}"') == "A\U0001F600"

    def test_line_continuation(self):
        assert ron.loads('"one \\\n    two"') == "one two"

    def test_raw_strings(self):
        assert ron.loads(r'r"C:\path"') == r"C:\path"
        assert ron.loads('r#"say "hi""#') == 'say "hi"'

    def test_char(self):
        assert ron.loads("'a'") == "a"
        assert ron.loads(r"'\n'") == "\n"

    def test_tuple_becomes_list(self):
        assert ron.loads("(1, 2, 3)") == [1, 2, 3]

    def test_enum_variants(self):
        assert ron.loads("Monocle") == "Monocle"
        assert ron.loads("Pixels(10)") == {"Pixels": 10}
        assert ron.loads("Point(1, 2)") == {"Point": [1, 2]}

    def test_map_keys(self):
        assert ron.loads('{"a": 1, 2: "b"}') == {"a": 1, 2: "b"}
        assert ron.loads("{[1, 2]: true}") == {(1, 2): True}

    def test_nested_list_map_key(self):
        assert ron.loads("{[[1], 2]: true}") == {((1,), 2): True}

    def test_trailing_commas(self):
        assert ron.loads("[1, 2,]") == [1, 2]
        assert ron.loads("(a: 1,)") == {"a": 1}


class TestSyntaxErrors:
    """Test error reporting."""

    def test_missing_comma_position(self):
        with pytest.raises(RonSyntaxError) as exc_info:
            ron.loads("(\n    a: 1\n    b: 2,\n)")

        error = exc_info.value
        assert error.code == ErrorCode.RON_SYNTAX_ERROR
        assert (error.line, error.column) == (3, 5)

    def test_unterminated_string(self):
        with pytest.raises(RonSyntaxError) as exc_info:
            ron.loads('(a: "open)')
        assert (exc_info.value.line, exc_info.value.column) == (1, 5)

    @pytest.mark.parametrize("text", [
        "",
        "(a: 1, a: 2)",
        "[1, 2",
        "(a: 1) extra",
        "/* never closed",
        '"\\q"',
        "#![deny(x)] ()",
        "@",
    ])
    def test_invalid_documents(self, text):
        with pytest.raises(RonSyntaxError):
            ron.loads(text)

    @pytest.mark.parametrize("text", [
        '"\\u{110000}"',
        '"\\u{D800}"',
        '"\\u{_}"',
    ])
    def test_invalid_code_points(self, text):
        with pytest.raises(RonSyntaxError) as exc_info:
            ron.loads(text)
        assert "code point" in exc_info.value.reason

    @pytest.mark.parametrize("text,column", [
        ("({(a: 1): 2})", 3),
        ("{{1: 2}: 3}", 2),
        ("{[(a: 1)]: 3}", 2),
    ])
    def test_unhashable_map_key(self, text, column):
        with pytest.raises(RonSyntaxError) as exc_info:
            ron.loads(text)
        assert exc_info.value.reason == "Map key must be hashable"
        assert exc_info.value.column == column

    def test_unhashable_key_in_config_falls_back(self, loader, default_document):
        loader.config_dir.mkdir(parents=True)
        loader.ron_path.write_text('(modkey: "\\u{110000}", tags: {(a: 1): 2})')

        assert loader.load_or_default(loader.ron_path) == default_document


class TestWriter:
    """Test pretty printing."""

    def test_header(self):
        assert ron.dumps({"a": 1}).startswith("#![enable(implicit_some)]\n")

    def test_no_header_without_extensions(self):
        assert ron.RonWriter(extensions=()).write(1) == "1"

    def test_layout(self):
        value = {
            "modkey": "Mod4",
            "tags": ["1", "2"],
            "keybind": [{"command": Color.RED, "modifier": ["modkey", "Shift"], "key": "q"}],
            "empty": [],
            "width": None,
        }

        assert ron.dumps(value) == (
            "#![enable(implicit_some)]\n"
            "(\n"
            '    modkey: "Mod4",\n'
            "    tags: [\n"
            '        "1",\n'
            '        "2",\n'
            "    ],\n"
            "    keybind: [\n"
            '        (command: Red, modifier: ["modkey", "Shift"], key: "q"),\n'
            "    ],\n"
            "    empty: [],\n"
            "    width: None,\n"
            ")"
        )

    def test_depth_limit(self):
        text = ron.RonWriter(depth_limit=1, extensions=()).write({"tags": ["1", "2"]})
        assert text == '(\n    tags: ["1", "2"],\n)'

    @pytest.mark.parametrize("value,expected", [
        (True, "true"),
        (3, "3"),
        (2.0, "2.0"),
        (0.5, "0.5"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
        (math.nan, "NaN"),
        ('say "hi"\n', r'"say \"hi\"\n"'),
        ({1: "a"}, '{1: "a"}'),
    ])
    def test_scalars(self, value, expected):
        writer = ron.RonWriter(depth_limit=0, extensions=())
        assert writer.write(value) == expected

    def test_written_text_reads_back(self, sample_ron):
        data = ron.loads(sample_ron)
        assert ron.loads(ron.dumps(data)) == data

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            ron.dumps({"a": {1, 2}})
