"""
pywit Payload Codec
Converts user-edited value trees into the typed invocation payload

The codec is conservative: it only normalizes types whose editor values it
can trust, and rejects everything else with an UnsupportedType error rather
than forwarding a raw value the server may misinterpret.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from pywit.errors import WitError
from pywit.types import (
    ExportedFunction,
    Type,
    TypedValue,
    ValueTree,
    NUMERIC_KINDS,
    kind_of,
)
from pywit.validator import type_to_json

logger = logging.getLogger(__name__)


# Tags whose edited value is forwarded untouched
PASSTHROUGH_KINDS = ("Str", "Char", "Bool") + NUMERIC_KINDS + ("Tuple", "Record", "Enum")


#==============================================================================
# Encoding
#==============================================================================

def encode_value(value: ValueTree, t: Optional[Type]) -> ValueTree:
    """Normalize one edited value for its declared type"""
    kind = kind_of(t)

    if kind in PASSTHROUGH_KINDS:
        return value
    elif kind == "List":
        return value if isinstance(value, (list, tuple)) else [value]

    logger.warning("Cannot encode value for type %s", kind)
    raise WitError.unsupported_type(kind)


def encode(value: ValueTree, t: Type) -> TypedValue:
    """Encode one argument as a (value, typ) pair"""
    return TypedValue(value=encode_value(value, t), typ=t)


def encode_params(values: Sequence[ValueTree], fn: ExportedFunction) -> List[TypedValue]:
    """
    Encode the editor's argument list against a function's parameters.

    Values are paired with parameters by index; a missing value is encoded
    as None. Matching the argument count is up to the caller.
    """
    encoded: List[TypedValue] = []
    for index, param in enumerate(fn.parameters):
        user_value = values[index] if index < len(values) else None
        encoded.append(encode(user_value, param.typ))  # type: ignore[arg-type]
    return encoded


def build_payload(values: Sequence[ValueTree], fn: ExportedFunction) -> Dict[str, Any]:
    """Build the JSON request body for invoking a function"""
    params = [
        {"value": tv.value, "typ": type_to_json(tv.typ)}
        for tv in encode_params(values, fn)
    ]
    logger.debug("Built payload for %s with %d param(s)", fn.name, len(params))
    return {"params": params}


#==============================================================================
# Editor Text
#==============================================================================

def safe_format_json(text: str) -> str:
    """Re-indent JSON text; text that does not parse is returned unchanged"""
    try:
        parsed = json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return text
    return json.dumps(parsed, indent=2, ensure_ascii=False)


def parse_editor_text(text: str) -> Union[List[ValueTree], str]:
    """
    Parse the free-form argument editor buffer.

    A JSON array is returned as the argument list and any other JSON value
    as a single argument. Text that fails to parse is returned unchanged so
    the user's input is preserved.
    """
    try:
        parsed = json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return text
    if isinstance(parsed, list):
        return parsed
    return [parsed]
