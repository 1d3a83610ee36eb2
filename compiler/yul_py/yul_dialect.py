#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class Dialect:
    """
    Type names of a Yul flavor that the printer needs to know about.

    - default_type: the type the parser assumes when none is written; elided on output
    - bool_type:    the type of `true` / `false` literals
    """
    name: str
    default_type: str = ""
    bool_type: str = ""


EVM_DIALECT = Dialect(name="evm")
EVM_TYPED_DIALECT = Dialect(name="evm-typed", default_type="u256", bool_type="bool")

DIALECTS: Dict[str, Dialect] = {
    EVM_DIALECT.name: EVM_DIALECT,
    EVM_TYPED_DIALECT.name: EVM_TYPED_DIALECT,
}


def get_dialect(name: str) -> Optional[Dialect]:
    """Look up a dialect by name; "none" means no dialect (type names are printed as-is)."""
    if name == "none":
        return None
    return DIALECTS[name]
