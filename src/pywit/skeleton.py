"""
pywit Skeleton Generator
Builds default-populated value trees that seed the invocation editor
"""

from __future__ import annotations

from typing import List, Optional

from pywit.types import (
    ExportedFunction,
    Type,
    ValueTree,
    NUMERIC_KINDS,
    kind_of,
)


def skeleton(t: Optional[Type]) -> ValueTree:
    """
    Build the default value for a type.

    Lists start empty and options start absent; no enum case is
    pre-selected. Types without a sensible default yield None.
    """
    kind = kind_of(t)

    if kind in ("Str", "Char"):
        return ""
    elif kind == "Bool":
        return False
    elif kind in NUMERIC_KINDS:
        return 0
    elif kind == "Record":
        return {f.name: skeleton(f.typ) for f in t.fields}  # type: ignore
    elif kind == "Tuple":
        return [skeleton(f) for f in t.fields]  # type: ignore
    elif kind == "List":
        return []
    elif kind == "Option":
        return None
    elif kind == "Enum":
        return ""

    return None


def skeleton_params(fn: ExportedFunction) -> List[ValueTree]:
    """Initial editor state: one skeleton per parameter, in declaration order"""
    return [skeleton(p.typ) for p in fn.parameters]
