"""
pywit Export Listing
Function summaries of a component's exports for display and search
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from pywit.errors import WitError
from pywit.render import Rendering, render
from pywit.types import Export, ExportedFunction


KEBAB_PATTERN = re.compile(r"-([a-z])")


def camel_case(name: str) -> str:
    """Convert a kebab-case function name to camelCase"""
    return KEBAB_PATTERN.sub(lambda m: m.group(1).upper(), name)


#==============================================================================
# Function Summary
#==============================================================================

@dataclass(frozen=True)
class FunctionSummary:
    """Display row for one exported function"""
    package: str
    function_name: str
    parameters: Tuple[Tuple[str, Rendering], ...]
    returns: Optional[Rendering]

    @property
    def signature(self) -> str:
        """Inline signature, e.g. getUser(id: u64) => record"""
        params = ", ".join(f"{name}: {r.short}" for name, r in self.parameters)
        ret = self.returns.short if self.returns is not None else "void"
        return f"{self.function_name}({params}) => {ret}"


def summarize(package: str, fn: ExportedFunction) -> FunctionSummary:
    """Summarize one function of an export"""
    returns = render(fn.return_type) if fn.return_type is not None else None
    return FunctionSummary(
        package=package,
        function_name=camel_case(fn.name),
        parameters=tuple((p.name, render(p.typ)) for p in fn.parameters),
        returns=returns,
    )


def describe_exports(exports: Iterable[Export]) -> List[FunctionSummary]:
    """Summaries for every function of every export, in metadata order"""
    return [summarize(exp.name, fn) for exp in exports for fn in exp.functions]


def search_functions(summaries: Iterable[FunctionSummary], text: str) -> List[FunctionSummary]:
    """Case-insensitive substring filter on the function name"""
    needle = text.lower()
    return [s for s in summaries if needle in s.function_name.lower()]


def find_function(exports: Iterable[Export], name: str) -> ExportedFunction:
    """
    Look up an exported function.

    The name may be the raw or camelCase function name, optionally
    qualified by its export as 'package.function'.
    """
    package: Optional[str] = None
    if "." in name:
        package, name = name.rsplit(".", 1)

    for exp in exports:
        if package is not None and exp.name != package:
            continue
        for fn in exp.functions:
            if name in (fn.name, camel_case(fn.name)):
                return fn

    qualified = f"{package}.{name}" if package is not None else name
    raise WitError.unknown_function(qualified)
