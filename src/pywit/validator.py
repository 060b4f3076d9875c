# pywit Metadata Validator
# Structural validation and loading of component-metadata type JSON

from __future__ import annotations

import logging
from typing import Any

from pywit.errors import (
    ValidationError,
    ValidationResult,
    invalid_result,
    valid_result,
    exhaustive,
)
from pywit.types import (
    BoolType,
    Case,
    CharType,
    EnumType,
    Export,
    ExportedFunction,
    Field,
    FloatType,
    FunctionResult,
    ListType,
    OptionType,
    Parameter,
    RecordType,
    ResultType,
    SignedType,
    StrType,
    TupleType,
    Type,
    UnsignedType,
    VariantType,
    FLOAT_KINDS,
    PRIMITIVE_KINDS,
    SIGNED_KINDS,
    UNSIGNED_KINDS,
)

logger = logging.getLogger(__name__)


#==============================================================================
# Tag Aliases
#==============================================================================

# Older metadata producers spell the character tag "Chr"
KIND_ALIASES = {"Chr": "Char"}


def canonical_kind(tag: str) -> str:
    """Map a wire tag to its canonical spelling"""
    return KIND_ALIASES.get(tag, tag)


#==============================================================================
# Validation State
#==============================================================================

class ValidationState:
    """State tracking during validation"""

    def __init__(self) -> None:
        self.errors: list[ValidationError] = []
        self.path: list[str] = []

    def push_path(self, segment: str) -> None:
        """Push a path segment onto the validation path"""
        self.path.append(segment)

    def pop_path(self) -> None:
        """Pop the last path segment from the validation path"""
        self.path.pop()

    def current_path(self) -> str:
        """Get the current validation path as a dot-separated string"""
        if not self.path:
            return "$"
        return ".".join(self.path).replace(".[", "[")

    def add_error(self, message: str, value: Any | None = None) -> None:
        """Add a validation error to the state"""
        self.errors.append(ValidationError(
            path=self.current_path(),
            message=message,
            value=value,
        ))


#==============================================================================
# Primitive Validators
#==============================================================================

def validate_string(value: Any) -> bool:
    """Check if value is a string"""
    return isinstance(value, str)


def validate_array(value: Any) -> bool:
    """Check if value is a list"""
    return isinstance(value, list)


def validate_object(value: Any) -> bool:
    """Check if value is a dict (object)"""
    return isinstance(value, dict)


def check_unique(state: ValidationState, names: list[Any], container: str) -> None:
    """Record an error for every repeated name"""
    seen: set[str] = set()
    for name in names:
        if not validate_string(name):
            continue
        if name in seen:
            state.add_error(f"Duplicate {container} name: {name}", name)
        seen.add(name)


#==============================================================================
# Type Validation
#==============================================================================

def validate_type_node(state: ValidationState, value: Any) -> bool:
    """Validate a Type object"""
    if not validate_object(value):
        state.add_error("Type must be an object", value)
        return False

    if not validate_string(value.get("type")):
        state.add_error("Type must have 'type' property", value)
        return False

    kind = canonical_kind(value["type"])

    if kind in PRIMITIVE_KINDS:
        return True

    elif kind in ("List", "Option"):
        if value.get("inner") is None:
            state.add_error(f"{kind} type must have 'inner' property", value)
            return False
        state.push_path("inner")
        result = validate_type_node(state, value["inner"])
        state.pop_path()
        return result

    elif kind == "Result":
        valid = True
        for prop in ("ok", "err"):
            # Either side may be absent for results with no payload
            if value.get(prop) is None:
                continue
            state.push_path(prop)
            if not validate_type_node(state, value[prop]):
                valid = False
            state.pop_path()
        return valid

    elif kind == "Tuple":
        fields = value.get("fields", [])
        if not validate_array(fields):
            state.add_error("Tuple type 'fields' must be an array", fields)
            return False
        valid = True
        for i, item in enumerate(fields):
            state.push_path(f"fields[{i}]")
            if validate_object(item) and "typ" in item:
                state.push_path("typ")
                valid = validate_type_node(state, item["typ"]) and valid
                state.pop_path()
            else:
                valid = validate_type_node(state, item) and valid
            state.pop_path()
        return valid

    elif kind == "Record":
        fields = value.get("fields", [])
        if not validate_array(fields):
            state.add_error("Record type 'fields' must be an array", fields)
            return False
        valid = True
        for i, item in enumerate(fields):
            state.push_path(f"fields[{i}]")
            if not validate_object(item) or not validate_string(item.get("name")):
                state.add_error("Record field must have a 'name' string", item)
                valid = False
            elif "typ" not in item:
                state.add_error("Record field must have 'typ' property", item)
                valid = False
            else:
                state.push_path("typ")
                valid = validate_type_node(state, item["typ"]) and valid
                state.pop_path()
            state.pop_path()
        before = len(state.errors)
        check_unique(state, [f.get("name") for f in fields if validate_object(f)], "field")
        return valid and len(state.errors) == before

    elif kind == "Variant":
        cases = value.get("cases", [])
        if not validate_array(cases):
            state.add_error("Variant type 'cases' must be an array", cases)
            return False
        valid = True
        for i, item in enumerate(cases):
            state.push_path(f"cases[{i}]")
            if not validate_object(item) or not validate_string(item.get("name")):
                state.add_error("Variant case must have a 'name' string", item)
                valid = False
            elif item.get("typ") is not None:
                state.push_path("typ")
                valid = validate_type_node(state, item["typ"]) and valid
                state.pop_path()
            state.pop_path()
        before = len(state.errors)
        check_unique(state, [c.get("name") for c in cases if validate_object(c)], "case")
        return valid and len(state.errors) == before

    elif kind == "Enum":
        cases = value.get("cases", [])
        if not validate_array(cases) or not all(validate_string(c) for c in cases):
            state.add_error("Enum type 'cases' must be an array of strings", cases)
            return False
        before = len(state.errors)
        check_unique(state, cases, "case")
        return len(state.errors) == before

    else:
        state.add_error(f"Unknown type tag: {value['type']}", value)
        return False


#==============================================================================
# Type Construction
#==============================================================================

def build_type(value: Any) -> Type | None:
    """Build a Type from JSON that has already passed validation"""
    if value is None:
        return None

    kind = canonical_kind(value["type"])

    if kind == "Bool":
        return BoolType(kind="Bool")
    elif kind in SIGNED_KINDS:
        return SignedType(kind=kind)  # type: ignore[arg-type]
    elif kind in UNSIGNED_KINDS:
        return UnsignedType(kind=kind)  # type: ignore[arg-type]
    elif kind in FLOAT_KINDS:
        return FloatType(kind=kind)  # type: ignore[arg-type]
    elif kind == "Char":
        return CharType(kind="Char", wire_kind=value["type"])
    elif kind == "Str":
        return StrType(kind="Str")
    elif kind == "List":
        return ListType(kind="List", inner=build_type(value["inner"]))
    elif kind == "Option":
        return OptionType(kind="Option", inner=build_type(value["inner"]))
    elif kind == "Result":
        return ResultType(
            kind="Result",
            ok=build_type(value.get("ok")),
            err=build_type(value.get("err")),
        )
    elif kind == "Tuple":
        items = []
        for item in value.get("fields", []):
            items.append(build_type(item["typ"] if "typ" in item else item))
        return TupleType(kind="Tuple", fields=tuple(items))
    elif kind == "Record":
        return RecordType(
            kind="Record",
            fields=tuple(
                Field(name=f["name"], typ=build_type(f["typ"]))
                for f in value.get("fields", [])
            ),
        )
    elif kind == "Variant":
        return VariantType(
            kind="Variant",
            cases=tuple(
                Case(name=c["name"], typ=build_type(c.get("typ")))
                for c in value.get("cases", [])
            ),
        )
    elif kind == "Enum":
        return EnumType(kind="Enum", cases=tuple(value.get("cases", [])))

    exhaustive(value)
    return None


def type_to_json(t: Type | None) -> dict[str, Any] | None:
    """Serialize a Type to the wire JSON accepted by build_type"""
    if t is None:
        return None

    kind = t.kind

    if kind == "Char":
        return {"type": t.wire_kind}  # type: ignore
    elif kind in PRIMITIVE_KINDS:
        return {"type": kind}
    elif kind in ("List", "Option"):
        return {"type": kind, "inner": type_to_json(t.inner)}  # type: ignore
    elif kind == "Result":
        return {"type": kind, "ok": type_to_json(t.ok), "err": type_to_json(t.err)}  # type: ignore
    elif kind == "Tuple":
        return {"type": kind, "fields": [{"typ": type_to_json(f)} for f in t.fields]}  # type: ignore
    elif kind == "Record":
        return {
            "type": kind,
            "fields": [{"name": f.name, "typ": type_to_json(f.typ)} for f in t.fields],  # type: ignore
        }
    elif kind == "Variant":
        cases: list[dict[str, Any]] = []
        for c in t.cases:  # type: ignore
            case: dict[str, Any] = {"name": c.name}
            if c.typ is not None:
                case["typ"] = type_to_json(c.typ)
            cases.append(case)
        return {"type": kind, "cases": cases}
    elif kind == "Enum":
        return {"type": kind, "cases": list(t.cases)}  # type: ignore

    exhaustive(t)
    return None


#==============================================================================
# Function and Export Validation
#==============================================================================

def validate_function(state: ValidationState, value: Any) -> bool:
    """Validate an exported function description"""
    if not validate_object(value):
        state.add_error("Function must be an object", value)
        return False

    valid = True
    if not validate_string(value.get("name")):
        state.add_error("Function must have a 'name' string", value.get("name"))
        valid = False

    params = value.get("parameters", [])
    if not validate_array(params):
        state.push_path("parameters")
        state.add_error("Function 'parameters' must be an array", params)
        state.pop_path()
        return False

    for i, param in enumerate(params):
        state.push_path(f"parameters[{i}]")
        if not validate_object(param) or not validate_string(param.get("name")):
            state.add_error("Parameter must have a 'name' string", param)
            valid = False
        elif "typ" not in param:
            state.add_error("Parameter must have 'typ' property", param)
            valid = False
        else:
            state.push_path("typ")
            valid = validate_type_node(state, param["typ"]) and valid
            state.pop_path()
        state.pop_path()

    state.push_path("parameters")
    before = len(state.errors)
    check_unique(state, [p.get("name") for p in params if validate_object(p)], "parameter")
    valid = valid and len(state.errors) == before
    state.pop_path()

    results = value.get("results", [])
    if not validate_array(results):
        state.push_path("results")
        state.add_error("Function 'results' must be an array", results)
        state.pop_path()
        return False

    for i, res in enumerate(results):
        state.push_path(f"results[{i}]")
        if not validate_object(res) or "typ" not in res:
            state.add_error("Result must have 'typ' property", res)
            valid = False
        else:
            state.push_path("typ")
            valid = validate_type_node(state, res["typ"]) and valid
            state.pop_path()
        state.pop_path()

    return valid


def validate_export(state: ValidationState, value: Any) -> bool:
    """Validate an export (interface) description"""
    if not validate_object(value):
        state.add_error("Export must be an object", value)
        return False

    valid = True
    if not validate_string(value.get("name")):
        state.add_error("Export must have a 'name' string", value.get("name"))
        valid = False

    functions = value.get("functions", [])
    if not validate_array(functions):
        state.push_path("functions")
        state.add_error("Export 'functions' must be an array", functions)
        state.pop_path()
        return False

    for i, fn in enumerate(functions):
        state.push_path(f"functions[{i}]")
        valid = validate_function(state, fn) and valid
        state.pop_path()

    state.push_path("functions")
    before = len(state.errors)
    check_unique(state, [fn.get("name") for fn in functions if validate_object(fn)], "function")
    valid = valid and len(state.errors) == before
    state.pop_path()

    return valid


def exports_of(doc: Any) -> Any:
    """Locate the exports array in a metadata document"""
    if validate_array(doc):
        return doc
    if validate_object(doc):
        if "exports" in doc:
            return doc["exports"]
        metadata = doc.get("metadata")
        if validate_object(metadata) and "exports" in metadata:
            return metadata["exports"]
    return None


#==============================================================================
# Document Validation
#==============================================================================

def validate_type(doc: Any) -> ValidationResult:
    """Validate a single type JSON document"""
    state = ValidationState()
    validate_type_node(state, doc)

    if state.errors:
        return invalid_result(state.errors)

    return valid_result(doc)


def validate_metadata(doc: Any) -> ValidationResult:
    """Validate a component metadata document"""
    state = ValidationState()

    exports = exports_of(doc)
    if not validate_array(exports):
        state.push_path("exports")
        state.add_error("Document must have an 'exports' array", exports)
        state.pop_path()
        return invalid_result(state.errors)

    for i, export in enumerate(exports):
        state.push_path(f"exports[{i}]")
        validate_export(state, export)
        state.pop_path()

    if state.errors:
        return invalid_result(state.errors)

    return valid_result(exports)


#==============================================================================
# Loading
#==============================================================================

def _reject(result: ValidationResult, what: str) -> None:
    if not result.valid:
        logger.debug("Rejected %s with %d error(s): %s", what, len(result.errors), result.errors)
        result.raise_for_errors()


def load_type(doc: Any) -> Type:
    """Validate and build a Type; raises WitError when invalid"""
    _reject(validate_type(doc), "type")
    return build_type(doc)  # type: ignore[return-value]


def _build_function(value: dict[str, Any]) -> ExportedFunction:
    return ExportedFunction(
        name=value["name"],
        parameters=tuple(
            Parameter(name=p["name"], typ=build_type(p["typ"]))
            for p in value.get("parameters", [])
        ),
        results=tuple(
            FunctionResult(typ=build_type(r["typ"]), name=r.get("name"))
            for r in value.get("results", [])
        ),
    )


def load_function(doc: Any) -> ExportedFunction:
    """Validate and build a single exported function"""
    state = ValidationState()
    validate_function(state, doc)
    _reject(invalid_result(state.errors) if state.errors else valid_result(doc), "function")
    return _build_function(doc)


def load_exports(doc: Any) -> list[Export]:
    """Validate and build every export of a metadata document"""
    result = validate_metadata(doc)
    _reject(result, "metadata")
    return [
        Export(
            name=e["name"],
            functions=tuple(_build_function(f) for f in e.get("functions", [])),
        )
        for e in result.value
    ]
