"""
Unit tests for metadata validation and loading.
"""

import pytest

from pywit import (
    ErrorCodes,
    WitError,
    char_type, str_type, u32_type, u64_type, s32_type, bool_type,
    list_type, option_type, result_type, tuple_type, record_type,
    variant_type, enum_type,
    load_exports, load_function, load_type, type_to_json,
    validate_metadata, validate_type,
)


class TestLoadType:
    """Wire JSON to Type."""

    def test_primitive(self):
        assert load_type({"type": "U32"}) == u32_type()

    def test_chr_alias(self):
        assert load_type({"type": "Chr"}) == char_type()

    def test_list(self):
        assert load_type({"type": "List", "inner": {"type": "Str"}}) == list_type(str_type())

    def test_result_absent_side(self):
        t = load_type({"type": "Result", "ok": None, "err": {"type": "Str"}})
        assert t == result_type(None, str_type())

    def test_tuple_fields(self):
        doc = {"type": "Tuple", "fields": [{"typ": {"type": "S32"}}, {"type": "Bool"}]}
        assert load_type(doc) == tuple_type([s32_type(), bool_type()])

    def test_record(self):
        doc = {"type": "Record", "fields": [
            {"name": "id", "typ": {"type": "U64"}},
            {"name": "tags", "typ": {"type": "List", "inner": {"type": "Str"}}},
        ]}
        assert load_type(doc) == record_type([("id", u64_type()), ("tags", list_type(str_type()))])

    def test_variant(self):
        doc = {"type": "Variant", "cases": [{"name": "some", "typ": {"type": "Str"}}, {"name": "none"}]}
        assert load_type(doc) == variant_type([("some", str_type()), "none"])

    def test_enum(self):
        assert load_type({"type": "Enum", "cases": ["a", "b"]}) == enum_type(["a", "b"])

    def test_empty_composites(self):
        assert load_type({"type": "Record"}) == record_type([])
        assert load_type({"type": "Enum", "cases": []}) == enum_type([])


class TestValidateType:
    """Structural errors with paths."""

    def test_unknown_tag(self):
        result = validate_type({"type": "Future"})
        assert not result.valid
        assert result.errors[0].path == "$"
        assert "Future" in result.errors[0].message

    def test_missing_inner(self):
        result = validate_type({"type": "Option"})
        assert not result.valid

    def test_nested_path(self):
        doc = {"type": "Record", "fields": [
            {"name": "a", "typ": {"type": "List", "inner": {"type": "Nope"}}},
        ]}
        result = validate_type(doc)
        assert [e.path for e in result.errors] == ["fields[0].typ.inner"]

    def test_duplicate_field(self):
        doc = {"type": "Record", "fields": [
            {"name": "a", "typ": {"type": "Str"}},
            {"name": "a", "typ": {"type": "U8"}},
        ]}
        result = validate_type(doc)
        assert not result.valid
        assert "Duplicate field name: a" in result.errors[0].message

    def test_duplicate_enum_case(self):
        assert not validate_type({"type": "Enum", "cases": ["a", "a"]}).valid

    def test_duplicate_variant_case(self):
        assert not validate_type({"type": "Variant", "cases": [{"name": "a"}, {"name": "a"}]}).valid

    def test_enum_cases_must_be_strings(self):
        assert not validate_type({"type": "Enum", "cases": [1]}).valid

    def test_not_an_object(self):
        assert not validate_type("Str").valid

    def test_load_raises(self):
        with pytest.raises(WitError) as exc:
            load_type({"type": "Nope"})
        assert exc.value.code == ErrorCodes.VALIDATION_ERROR


class TestTypeToJson:
    """Type to wire JSON."""

    @pytest.mark.parametrize("doc", [
        {"type": "Str"},
        {"type": "List", "inner": {"type": "U8"}},
        {"type": "Option", "inner": {"type": "Char"}},
        {"type": "Result", "ok": {"type": "Str"}, "err": None},
        {"type": "Tuple", "fields": [{"typ": {"type": "F64"}}]},
        {"type": "Record", "fields": [{"name": "a", "typ": {"type": "Bool"}}]},
        {"type": "Variant", "cases": [{"name": "a"}, {"name": "b", "typ": {"type": "S64"}}]},
        {"type": "Enum", "cases": ["x"]},
    ])
    def test_canonical_json(self, doc):
        assert type_to_json(load_type(doc)) == doc

    def test_none(self):
        assert type_to_json(None) is None

    def test_chr_spelling_is_kept(self):
        assert type_to_json(load_type({"type": "Chr"})) == {"type": "Chr"}
        nested = {"type": "Option", "inner": {"type": "Chr"}}
        assert type_to_json(load_type(nested)) == nested

    def test_constructed_char_writes_char(self):
        assert type_to_json(char_type()) == {"type": "Char"}


class TestMetadata:
    """Whole metadata documents."""

    def test_fixture(self, exports):
        assert [e.name for e in exports] == ["golem:shop/api"]
        names = [f.name for f in exports[0].functions]
        assert names == ["get-user", "add-items", "find-item"]

    def test_return_type(self, exports):
        get_user = exports[0].functions[0]
        assert get_user.return_type == record_type([("name", str_type()), ("age", u32_type())])
        assert exports[0].functions[1].return_type is None

    def test_document_shapes(self, metadata_doc):
        inner = metadata_doc["metadata"]
        assert load_exports(inner) == load_exports(metadata_doc)
        assert load_exports(inner["exports"]) == load_exports(metadata_doc)

    def test_missing_exports(self):
        result = validate_metadata({"components": []})
        assert not result.valid
        assert result.errors[0].path == "exports"

    def test_error_path(self):
        doc = {"exports": [{"name": "api", "functions": [
            {"name": "f", "parameters": [{"name": "a", "typ": {"type": "Bad"}}], "results": []},
        ]}]}
        result = validate_metadata(doc)
        assert result.errors[0].path == "exports[0].functions[0].parameters[0].typ"

    def test_duplicate_parameter(self):
        doc = {"exports": [{"name": "api", "functions": [
            {"name": "f", "parameters": [
                {"name": "a", "typ": {"type": "Str"}},
                {"name": "a", "typ": {"type": "Str"}},
            ]},
        ]}]}
        with pytest.raises(WitError):
            load_exports(doc)

    def test_duplicate_function(self):
        doc = {"exports": [{"name": "api", "functions": [
            {"name": "f", "parameters": [], "results": []},
            {"name": "f", "parameters": [{"name": "a", "typ": {"type": "Str"}}], "results": []},
        ]}]}
        result = validate_metadata(doc)
        assert not result.valid
        assert result.errors[0].path == "exports[0].functions"
        assert result.errors[0].message == "Duplicate function name: f"
        with pytest.raises(WitError) as excinfo:
            load_exports(doc)
        assert excinfo.value.code == ErrorCodes.VALIDATION_ERROR

    def test_same_function_name_in_two_exports(self):
        doc = {"exports": [
            {"name": "a", "functions": [{"name": "f", "parameters": [], "results": []}]},
            {"name": "b", "functions": [{"name": "f", "parameters": [], "results": []}]},
        ]}
        assert validate_metadata(doc).valid

    def test_load_function(self):
        fn = load_function({
            "name": "f",
            "parameters": [{"name": "q", "typ": {"type": "Option", "inner": {"type": "Str"}}}],
            "results": [{"typ": {"type": "Bool"}}],
        })
        assert fn.parameters[0].typ == option_type(str_type())
        assert fn.return_type == bool_type()

    def test_load_function_invalid(self):
        with pytest.raises(WitError):
            load_function({"parameters": []})
