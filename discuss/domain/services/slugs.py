"""
Slug rules - turning a topic name into slug candidates.

normalize_name("Rust  Lang") -> "rust-lang"
initial_candidate("admin", ...) -> "admin-1718000000000"
numbered_candidate("rust-lang", 2) -> "rust-lang-2"
"""

import re
from typing import AbstractSet

DEFAULT_RESERVED_SLUGS = frozenset({"topic", "admin", "dashboard"})

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_name(name: str) -> str:
    return _WHITESPACE_RUN.sub("-", name.strip().lower())


def initial_candidate(base: str, reserved: AbstractSet[str], now_ms: int) -> str:
    # Reserved route names are disambiguated up front with a timestamp.
    if base in reserved:
        return f"{base}-{now_ms}"
    return base


def numbered_candidate(base: str, counter: int) -> str:
    return f"{base}-{counter}"
