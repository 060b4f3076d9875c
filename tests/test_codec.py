"""
Unit tests for the payload codec.
"""

import logging

import pytest

from pywit import (
    ErrorCodes,
    WitError,
    TypedValue,
    bool_type, s32_type, u32_type, f64_type, char_type, str_type,
    list_type, option_type, result_type, tuple_type, record_type,
    variant_type, enum_type, exported_function,
    build_payload, encode, encode_params, parse_editor_text,
    load_function, safe_format_json, skeleton,
)


class TestEncode:
    """Per-argument encoding."""

    @pytest.mark.parametrize("typ, value", [
        (str_type(), "hello"),
        (char_type(), "x"),
        (bool_type(), True),
        (s32_type(), -4),
        (f64_type(), 1.5),
        (tuple_type([str_type(), bool_type()]), ["a", True]),
        (record_type([("a", str_type())]), {"a": "b"}),
        (enum_type(["pending"]), "pending"),
    ])
    def test_passthrough(self, typ, value):
        assert encode(value, typ) == TypedValue(value=value, typ=typ)

    def test_list_wraps_scalar(self):
        assert encode("x", list_type(str_type())).value == ["x"]

    def test_list_keeps_sequence(self):
        assert encode(["x", "y"], list_type(str_type())).value == ["x", "y"]

    def test_list_wrapping_is_idempotent(self):
        t = list_type(str_type())
        once = encode("x", t).value
        assert encode(once, t).value == once

    def test_list_wraps_none(self):
        assert encode(None, list_type(str_type())).value == [None]

    @pytest.mark.parametrize("typ, tag", [
        (option_type(str_type()), "Option"),
        (result_type(str_type(), str_type()), "Result"),
        (variant_type([("a", str_type())]), "Variant"),
    ])
    def test_unsupported(self, typ, tag):
        with pytest.raises(WitError) as exc:
            encode("v", typ)
        assert exc.value.code == ErrorCodes.UNSUPPORTED_TYPE
        assert exc.value.meta == {"type": tag}
        assert tag in str(exc.value)

    def test_unsupported_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="pywit.codec"):
            with pytest.raises(WitError):
                encode(None, option_type(str_type()))
        assert "Option" in caplog.text

    def test_unsupported_to_value(self):
        with pytest.raises(WitError) as exc:
            encode(None, option_type(str_type()))
        assert exc.value.to_value() == {
            "kind": "error",
            "code": "UnsupportedType",
            "meta": {"type": "Option"},
        }


class TestSkeletonRoundTrip:
    """Encoding a skeleton of a supported type returns it unchanged."""

    @pytest.mark.parametrize("typ", [
        str_type(),
        bool_type(),
        u32_type(),
        list_type(record_type([("a", str_type())])),
        tuple_type([str_type(), list_type(s32_type()), enum_type(["a"])]),
        record_type([
            ("name", str_type()),
            ("tags", list_type(str_type())),
            ("pos", tuple_type([f64_type(), f64_type()])),
        ]),
        record_type([]),
    ])
    def test_round_trip(self, typ):
        assert encode(skeleton(typ), typ).value == skeleton(typ)


class TestEncodeParams:
    """Whole argument lists."""

    def setup_method(self):
        self.fn = exported_function("add-items", [
            ("cart", str_type()),
            ("items", list_type(str_type())),
        ])

    def test_index_aligned(self):
        encoded = encode_params(["c1", "apple"], self.fn)
        assert [tv.value for tv in encoded] == ["c1", ["apple"]]
        assert [tv.typ for tv in encoded] == [str_type(), list_type(str_type())]

    def test_missing_value_is_none(self):
        encoded = encode_params(["c1"], self.fn)
        assert encoded[1].value == [None]

    def test_unsupported_parameter(self):
        fn = exported_function("f", [("q", option_type(str_type()))])
        with pytest.raises(WitError):
            encode_params([None], fn)

    def test_build_payload(self):
        payload = build_payload(["c1", ["apple", "pear"]], self.fn)
        assert payload == {
            "params": [
                {"value": "c1", "typ": {"type": "Str"}},
                {
                    "value": ["apple", "pear"],
                    "typ": {"type": "List", "inner": {"type": "Str"}},
                },
            ]
        }

    def test_build_payload_keeps_chr_tag(self):
        fn = load_function({
            "name": "f",
            "parameters": [
                {"name": "c", "typ": {"type": "Chr"}},
                {"name": "cs", "typ": {"type": "List", "inner": {"type": "Chr"}}},
            ],
            "results": [],
        })
        payload = build_payload(["x", "y"], fn)
        assert payload["params"][0] == {"value": "x", "typ": {"type": "Chr"}}
        assert payload["params"][1]["typ"] == {"type": "List", "inner": {"type": "Chr"}}

    def test_build_payload_char_tag(self):
        fn = exported_function("f", [("c", char_type())])
        assert build_payload(["x"], fn)["params"][0]["typ"] == {"type": "Char"}

    def test_build_payload_no_params(self):
        assert build_payload([], exported_function("ping")) == {"params": []}


class TestEditorText:
    """Free-form JSON editing."""

    def test_format(self):
        assert safe_format_json('{"a":[1,2]}') == '{\n  "a": [\n    1,\n    2\n  ]\n}'

    def test_format_keeps_unparseable_text(self):
        assert safe_format_json("{not json") == "{not json"

    def test_format_keeps_unicode(self):
        assert safe_format_json('["é"]') == '[\n  "é"\n]'

    def test_parse_array(self):
        assert parse_editor_text('["a", 1]') == ["a", 1]

    def test_parse_scalar_as_single_argument(self):
        assert parse_editor_text('"a"') == ["a"]

    def test_parse_failure_returns_text(self):
        assert parse_editor_text("[1, ") == "[1, "
