"""
pywit Type Definitions
Implements the interface Type tree, ValueTree, and exported-function metadata

This module provides frozen dataclasses for immutable type representations,
using Union types with Literal 'kind' fields for pattern matching. The 'kind'
of every node is the tag used on the wire by the component-metadata service.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import (
    Union,
    Optional,
    List,
    Dict,
    Iterable,
    Literal,
    Tuple,
    TypeAlias,
)

from pywit.errors import WitError


#==============================================================================
# Type Tags
#==============================================================================

SIGNED_KINDS = ("S8", "S16", "S32", "S64")
UNSIGNED_KINDS = ("U8", "U16", "U32", "U64")
FLOAT_KINDS = ("F32", "F64")
INTEGER_KINDS = SIGNED_KINDS + UNSIGNED_KINDS
NUMERIC_KINDS = INTEGER_KINDS + FLOAT_KINDS
PRIMITIVE_KINDS = ("Bool", "Char", "Str") + NUMERIC_KINDS


#==============================================================================
# Type Domain - primitives
#==============================================================================

@dataclass(frozen=True)
class BoolType:
    """Boolean primitive type"""
    kind: Literal["Bool"]


@dataclass(frozen=True)
class SignedType:
    """Signed integer type of width 8/16/32/64"""
    kind: Literal["S8", "S16", "S32", "S64"]

    @property
    def width(self) -> int:
        return int(self.kind[1:])


@dataclass(frozen=True)
class UnsignedType:
    """Unsigned integer type of width 8/16/32/64"""
    kind: Literal["U8", "U16", "U32", "U64"]

    @property
    def width(self) -> int:
        return int(self.kind[1:])


@dataclass(frozen=True)
class FloatType:
    """Floating point type of width 32/64"""
    kind: Literal["F32", "F64"]

    @property
    def width(self) -> int:
        return int(self.kind[1:])


@dataclass(frozen=True)
class CharType:
    """Single scalar character

    wire_kind keeps the tag as the metadata service spelled it ("Chr" or
    "Char") so payloads echo it back unchanged. It does not affect equality.
    """
    kind: Literal["Char"]
    wire_kind: str = field(default="Char", compare=False)


@dataclass(frozen=True)
class StrType:
    """UTF-8 text"""
    kind: Literal["Str"]


#==============================================================================
# Type Domain - composites
#==============================================================================

@dataclass(frozen=True)
class ListType:
    """Homogeneous list of unbounded length"""
    kind: Literal["List"]
    inner: Optional[Type]


@dataclass(frozen=True)
class OptionType:
    """Optional value (present/absent)"""
    kind: Literal["Option"]
    inner: Optional[Type]


@dataclass(frozen=True)
class ResultType:
    """Exactly one of an ok or an err alternative"""
    kind: Literal["Result"]
    ok: Optional[Type]
    err: Optional[Type]


@dataclass(frozen=True)
class TupleType:
    """Fixed-arity tuple of unnamed fields"""
    kind: Literal["Tuple"]
    fields: Tuple[Type, ...]


@dataclass(frozen=True)
class Field:
    """Named record field"""
    name: str
    typ: Optional[Type]


@dataclass(frozen=True)
class RecordType:
    """Record with named fields, in display order"""
    kind: Literal["Record"]
    fields: Tuple[Field, ...]


@dataclass(frozen=True)
class Case:
    """Variant case, optionally carrying a payload"""
    name: str
    typ: Optional[Type] = None


@dataclass(frozen=True)
class VariantType:
    """Tagged union: exactly one case selected"""
    kind: Literal["Variant"]
    cases: Tuple[Case, ...]


@dataclass(frozen=True)
class EnumType:
    """Closed set of payload-less cases"""
    kind: Literal["Enum"]
    cases: Tuple[str, ...]


# Type union for all types
Type: TypeAlias = Union[
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
]


#==============================================================================
# Value Tree (untyped, JSON-compatible)
#==============================================================================

ValueTree: TypeAlias = Union[
    None,
    bool,
    int,
    float,
    str,
    List["ValueTree"],
    Dict[str, "ValueTree"],
]


@dataclass(frozen=True)
class TypedValue:
    """One argument of the invocation payload: a value with its declared type"""
    value: ValueTree
    typ: Type


#==============================================================================
# Exported Function Metadata
#==============================================================================

@dataclass(frozen=True)
class Parameter:
    """Named function parameter"""
    name: str
    typ: Optional[Type]


@dataclass(frozen=True)
class FunctionResult:
    """Function result; results are unnamed in most components"""
    typ: Optional[Type]
    name: Optional[str] = None


@dataclass(frozen=True)
class ExportedFunction:
    """Exported function signature as reported by component metadata"""
    name: str
    parameters: Tuple[Parameter, ...] = ()
    results: Tuple[FunctionResult, ...] = ()

    @property
    def return_type(self) -> Optional[Type]:
        """Type of the first result; only one logical value is displayed"""
        if not self.results:
            return None
        return self.results[0].typ


@dataclass(frozen=True)
class Export:
    """Exported interface (package) and its functions"""
    name: str
    functions: Tuple[ExportedFunction, ...] = ()


#==============================================================================
# Type Guards and Utility Functions
#==============================================================================

def kind_of(t: object) -> Optional[str]:
    """Return the tag of a type node, or None if it has none"""
    kind = getattr(t, "kind", None)
    return kind if isinstance(kind, str) else None


def is_primitive_type(t: Type) -> bool:
    """Check if type is a primitive type"""
    return kind_of(t) in PRIMITIVE_KINDS


def is_integer_type(t: Type) -> bool:
    """Check if type is a signed or unsigned integer"""
    return kind_of(t) in INTEGER_KINDS


def is_numeric_type(t: Type) -> bool:
    """Check if type is an integer or a float"""
    return kind_of(t) in NUMERIC_KINDS


def type_equal(a: Optional[Type], b: Optional[Type]) -> bool:
    """Check if two types are structurally equal"""
    if a is None or b is None:
        return a is None and b is None

    if a.kind != b.kind:
        return False

    if a.kind in PRIMITIVE_KINDS:
        return True
    elif a.kind in ("List", "Option"):
        return type_equal(a.inner, b.inner)  # type: ignore
    elif a.kind == "Result":
        return (type_equal(a.ok, b.ok) and  # type: ignore
                type_equal(a.err, b.err))  # type: ignore
    elif a.kind == "Tuple":
        if len(a.fields) != len(b.fields):  # type: ignore
            return False
        return all(type_equal(fa, fb) for fa, fb in zip(a.fields, b.fields))  # type: ignore
    elif a.kind == "Record":
        if len(a.fields) != len(b.fields):  # type: ignore
            return False
        for fa, fb in zip(a.fields, b.fields):  # type: ignore
            if fa.name != fb.name or not type_equal(fa.typ, fb.typ):
                return False
        return True
    elif a.kind == "Variant":
        if len(a.cases) != len(b.cases):  # type: ignore
            return False
        for ca, cb in zip(a.cases, b.cases):  # type: ignore
            if ca.name != cb.name or not type_equal(ca.typ, cb.typ):
                return False
        return True
    elif a.kind == "Enum":
        return a.cases == b.cases  # type: ignore

    return False


def check_unique_names(container: str, names: Iterable[str]) -> None:
    """Raise a DuplicateName error if a name repeats within one composite"""
    seen: set[str] = set()
    for name in names:
        if name in seen:
            raise WitError.duplicate_name(container, name)
        seen.add(name)


#==============================================================================
# Type Constructors
#==============================================================================

def bool_type() -> BoolType:
    return BoolType(kind="Bool")


def s8_type() -> SignedType:
    return SignedType(kind="S8")


def s16_type() -> SignedType:
    return SignedType(kind="S16")


def s32_type() -> SignedType:
    return SignedType(kind="S32")


def s64_type() -> SignedType:
    return SignedType(kind="S64")


def u8_type() -> UnsignedType:
    return UnsignedType(kind="U8")


def u16_type() -> UnsignedType:
    return UnsignedType(kind="U16")


def u32_type() -> UnsignedType:
    return UnsignedType(kind="U32")


def u64_type() -> UnsignedType:
    return UnsignedType(kind="U64")


def f32_type() -> FloatType:
    return FloatType(kind="F32")


def f64_type() -> FloatType:
    return FloatType(kind="F64")


def char_type() -> CharType:
    return CharType(kind="Char")


def str_type() -> StrType:
    return StrType(kind="Str")


def list_type(inner: Optional[Type]) -> ListType:
    return ListType(kind="List", inner=inner)


def option_type(inner: Optional[Type]) -> OptionType:
    return OptionType(kind="Option", inner=inner)


def result_type(ok: Optional[Type], err: Optional[Type]) -> ResultType:
    return ResultType(kind="Result", ok=ok, err=err)


def tuple_type(fields: Iterable[Type]) -> TupleType:
    return TupleType(kind="Tuple", fields=tuple(fields))


def record_type(fields: Iterable[Union[Field, Tuple[str, Type]]]) -> RecordType:
    """Create a record; fields may be Field instances or (name, type) pairs"""
    items = tuple(f if isinstance(f, Field) else Field(name=f[0], typ=f[1]) for f in fields)
    check_unique_names("record", (f.name for f in items))
    return RecordType(kind="Record", fields=items)


def variant_type(cases: Iterable[Union[Case, str, Tuple[str, Optional[Type]]]]) -> VariantType:
    """Create a variant; cases may be Case instances, bare names, or (name, type) pairs"""
    items: List[Case] = []
    for c in cases:
        if isinstance(c, Case):
            items.append(c)
        elif isinstance(c, str):
            items.append(Case(name=c))
        else:
            items.append(Case(name=c[0], typ=c[1]))
    check_unique_names("variant", (c.name for c in items))
    return VariantType(kind="Variant", cases=tuple(items))


def enum_type(cases: Iterable[str]) -> EnumType:
    items = tuple(cases)
    check_unique_names("enum", items)
    return EnumType(kind="Enum", cases=items)


#==============================================================================
# Function Constructors
#==============================================================================

def exported_function(
    name: str,
    parameters: Iterable[Union[Parameter, Tuple[str, Type]]] = (),
    results: Iterable[Union[FunctionResult, Type]] = (),
) -> ExportedFunction:
    """Create an ExportedFunction from (name, type) pairs and result types"""
    params = tuple(
        p if isinstance(p, Parameter) else Parameter(name=p[0], typ=p[1])
        for p in parameters
    )
    check_unique_names(f"function '{name}'", (p.name for p in params))
    res = tuple(r if isinstance(r, FunctionResult) else FunctionResult(typ=r) for r in results)
    return ExportedFunction(name=name, parameters=params, results=res)
