"""Identifier derivation for generated Dart members and classes."""

from __future__ import annotations

import re
from collections import defaultdict
from typing import Dict, Iterable, List, Mapping, Tuple

from .models import AssetRef

# Dart reserved words plus Object members a String field must not shadow.
DART_RESERVED = frozenset(
    {
        "assert", "await", "break", "case", "catch", "class", "const", "continue",
        "default", "do", "else", "enum", "extends", "false", "final", "finally",
        "for", "if", "in", "is", "new", "null", "rethrow", "return", "super",
        "switch", "this", "throw", "true", "try", "var", "void", "while", "with",
        "yield", "hashCode", "noSuchMethod", "runtimeType", "toString",
    }
)

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")
_WORD = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")


def split_words(raw: str) -> List[str]:
    """Split ``raw`` into ASCII words on separators and camel-case humps."""
    words: List[str] = []
    for chunk in _NON_ALNUM.split(raw):
        words.extend(_WORD.findall(chunk))
    return words


def to_identifier(raw: str, *, upper: bool = False) -> str:
    """Sanitize ``raw`` into a Dart identifier.

    Members are lower-camel, class names upper-camel. The result is never
    empty, never starts with a digit and never is a reserved word.
    """
    words = [word.lower() for word in split_words(raw)]
    if not words:
        words = ["unnamed"]
    head, tail = words[0], words[1:]
    first = head.capitalize() if upper else head
    identifier = first + "".join(word.capitalize() for word in tail)
    if identifier[0].isdigit():
        identifier = ("N" if upper else "n") + identifier
    if identifier in DART_RESERVED:
        identifier += "_"
    return identifier


def resolve_collisions(
    raw_names: Iterable[str],
    *,
    upper: bool = False,
    reserved: Iterable[str] = (),
) -> Dict[str, str]:
    """Assign a unique identifier to each raw name of one sibling set.

    Raw names that sanitize to the same identifier are ordered
    lexicographically; the first keeps the bare identifier, the others get the
    smallest numeric suffix not claimed by a sibling or a reserved name. The
    result depends only on the set of names, never on iteration order.
    """
    return disambiguate(
        {raw: to_identifier(raw, upper=upper) for raw in set(raw_names)},
        reserved=reserved,
    )


def disambiguate(candidates: Mapping[str, str], *, reserved: Iterable[str] = ()) -> Dict[str, str]:
    """Make the ``raw -> identifier`` proposals of one sibling set unique."""
    reserved_set = set(reserved)
    groups: Dict[str, List[str]] = defaultdict(list)
    for raw, identifier in candidates.items():
        groups[identifier].append(raw)

    taken = set(groups) | reserved_set
    resolved: Dict[str, str] = {}
    for identifier in sorted(groups):
        members = sorted(groups[identifier])
        if identifier not in reserved_set:
            resolved[members.pop(0)] = identifier
        suffix = 2
        for raw in members:
            while f"{identifier}{suffix}" in taken:
                suffix += 1
            candidate = f"{identifier}{suffix}"
            taken.add(candidate)
            resolved[raw] = candidate
    return resolved


def strip_asset_root(asset: AssetRef) -> Tuple[str, ...]:
    """Return the directory segments below the asset root (first segment)."""
    return asset.segments[1:]


def name_for(asset: AssetRef) -> Tuple[Tuple[str, ...], str]:
    """Return ``(namespace_path, leaf)`` identifiers for a single asset.

    The leaf is the identifier generators propose for the asset; whole sibling
    sets are then made unique with :func:`disambiguate`, so emitted names
    differ from this only by a numeric suffix.
    """
    namespace = tuple(to_identifier(segment) for segment in strip_asset_root(asset))
    return namespace, to_identifier(asset.stem)


__all__ = [
    "DART_RESERVED",
    "disambiguate",
    "name_for",
    "resolve_collisions",
    "split_words",
    "strip_asset_root",
    "to_identifier",
]
