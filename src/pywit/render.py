"""
pywit Signature Renderer
Renders a Type as a short inline label and a full, copyable declaration

The renderer is total: absent input renders as "null" and an unrecognized
node renders as "unknown", so display never fails on partial metadata.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Optional

from pywit.types import (
    Type,
    FLOAT_KINDS,
    SIGNED_KINDS,
    UNSIGNED_KINDS,
    kind_of,
)


#==============================================================================
# Rendering
#==============================================================================

@dataclass(frozen=True)
class Rendering:
    """Short label and full declaration of a type"""
    short: str
    full: str


NULL_RENDERING = Rendering(short="null", full="null")
UNKNOWN_RENDERING = Rendering(short="unknown", full="unknown")


def capitalize_case(name: str) -> str:
    """Upper-case the first character, leaving the rest untouched"""
    return name[:1].upper() + name[1:]


def _same(text: str) -> Rendering:
    return Rendering(short=text, full=text)


#==============================================================================
# Renderer
#==============================================================================

def render(t: Optional[Type]) -> Rendering:
    """Render a type as a (short, full) pair"""
    if t is None:
        return NULL_RENDERING

    kind = kind_of(t)

    if kind == "Bool":
        return _same("bool")
    elif kind in SIGNED_KINDS:
        return _same(f"i{kind[1:]}")
    elif kind in UNSIGNED_KINDS:
        return _same(f"u{kind[1:]}")
    elif kind in FLOAT_KINDS:
        return _same(kind.lower())
    elif kind == "Char":
        return _same("char")
    elif kind == "Str":
        return Rendering(short="string", full="String")

    elif kind == "List":
        inner = render(t.inner)  # type: ignore
        return Rendering(short=f"list<{inner.short}>", full=f"list<{inner.full}>")

    elif kind == "Option":
        inner = render(t.inner)  # type: ignore
        return Rendering(short=f"option<{inner.short}>", full=f"Option<{inner.full}>")

    elif kind == "Result":
        ok = render(t.ok)  # type: ignore
        err = render(t.err)  # type: ignore
        return Rendering(
            short=f"result<{ok.short}, {err.short}>",
            full=f"Result<{ok.full}, {err.full}>",
        )

    elif kind == "Tuple":
        elements = [render(f) for f in t.fields]  # type: ignore
        return Rendering(
            short=f"tuple<{', '.join(e.short for e in elements)}>",
            full=f"({', '.join(e.full for e in elements)})",
        )

    elif kind == "Record":
        layout = {f.name: render(f.typ).full for f in t.fields}  # type: ignore
        return Rendering(short="record", full=json.dumps(layout, indent=2, ensure_ascii=False))

    elif kind == "Variant":
        cases = []
        for c in t.cases:  # type: ignore
            payload = render(c.typ).full if c.typ is not None else ""
            cases.append(f"{capitalize_case(c.name)}({payload})")
        body = ",\n  ".join(cases)
        return Rendering(short="variant", full=f"enum {{\n  {body}\n}}")

    elif kind == "Enum":
        body = ",\n  ".join(capitalize_case(c) for c in t.cases)  # type: ignore
        return Rendering(short="enum", full=f"enum (\n  {body}\n)")

    return UNKNOWN_RENDERING


def render_short(t: Optional[Type]) -> str:
    """Compact inline label of a type"""
    return render(t).short


def render_full(t: Optional[Type]) -> str:
    """Expanded declaration of a type"""
    return render(t).full
