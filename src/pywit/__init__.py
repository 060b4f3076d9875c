"""
pywit: interface-type engine for component exports

Renders WIT-like interface types as short labels and full declarations,
builds default argument skeletons for an invocation editor, and encodes
edited arguments into the typed payload used to invoke a function.
"""

from __future__ import annotations

#==============================================================================
# Types
#==============================================================================

from pywit.types import (
    # Base types
    Type,
    ValueTree,
    TypedValue,
    # Type nodes
    BoolType,
    SignedType,
    UnsignedType,
    FloatType,
    CharType,
    StrType,
    ListType,
    OptionType,
    ResultType,
    TupleType,
    RecordType,
    VariantType,
    EnumType,
    Field,
    Case,
    # Function metadata
    Parameter,
    FunctionResult,
    ExportedFunction,
    Export,
)

#==============================================================================
# Type Constructors
#==============================================================================

from pywit.types import (
    bool_type,
    s8_type,
    s16_type,
    s32_type,
    s64_type,
    u8_type,
    u16_type,
    u32_type,
    u64_type,
    f32_type,
    f64_type,
    char_type,
    str_type,
    list_type,
    option_type,
    result_type,
    tuple_type,
    record_type,
    variant_type,
    enum_type,
    exported_function,
)

#==============================================================================
# Type Guards and Utilities
#==============================================================================

from pywit.types import (
    is_integer_type,
    is_numeric_type,
    is_primitive_type,
    type_equal,
)

#==============================================================================
# Error Codes
#==============================================================================

from pywit.errors import (
    ErrorCodes,
    WitError,
    ValidationError,
    ValidationResult,
    invalid_result,
    valid_result,
)

#==============================================================================
# Metadata Loading
#==============================================================================

from pywit.validator import (
    load_exports,
    load_function,
    load_type,
    type_to_json,
    validate_metadata,
    validate_type,
)

#==============================================================================
# Rendering, Skeletons, Encoding
#==============================================================================

from pywit.render import (
    Rendering,
    render,
    render_full,
    render_short,
)

from pywit.skeleton import (
    skeleton,
    skeleton_params,
)

from pywit.codec import (
    build_payload,
    encode,
    encode_params,
    parse_editor_text,
    safe_format_json,
)

from pywit.exports import (
    FunctionSummary,
    camel_case,
    describe_exports,
    find_function,
    search_functions,
)

__version__ = "0.1.0"

__all__ = [
    #==========================================================================
    # Types
    #==========================================================================
    "Type",
    "ValueTree",
    "TypedValue",
    "BoolType",
    "SignedType",
    "UnsignedType",
    "FloatType",
    "CharType",
    "StrType",
    "ListType",
    "OptionType",
    "ResultType",
    "TupleType",
    "RecordType",
    "VariantType",
    "EnumType",
    "Field",
    "Case",
    "Parameter",
    "FunctionResult",
    "ExportedFunction",
    "Export",

    #==========================================================================
    # Type Constructors
    #==========================================================================
    "bool_type",
    "s8_type",
    "s16_type",
    "s32_type",
    "s64_type",
    "u8_type",
    "u16_type",
    "u32_type",
    "u64_type",
    "f32_type",
    "f64_type",
    "char_type",
    "str_type",
    "list_type",
    "option_type",
    "result_type",
    "tuple_type",
    "record_type",
    "variant_type",
    "enum_type",
    "exported_function",

    #==========================================================================
    # Type Guards and Utilities
    #==========================================================================
    "is_integer_type",
    "is_numeric_type",
    "is_primitive_type",
    "type_equal",

    #==========================================================================
    # Error Codes
    #==========================================================================
    "ErrorCodes",
    "WitError",
    "ValidationError",
    "ValidationResult",
    "invalid_result",
    "valid_result",

    #==========================================================================
    # Metadata Loading
    #==========================================================================
    "load_exports",
    "load_function",
    "load_type",
    "type_to_json",
    "validate_metadata",
    "validate_type",

    #==========================================================================
    # Rendering, Skeletons, Encoding
    #==========================================================================
    "Rendering",
    "render",
    "render_full",
    "render_short",
    "skeleton",
    "skeleton_params",
    "build_payload",
    "encode",
    "encode_params",
    "parse_editor_text",
    "safe_format_json",

    #==========================================================================
    # Export Listing
    #==========================================================================
    "FunctionSummary",
    "camel_case",
    "describe_exports",
    "find_function",
    "search_functions",
]
