"""In-memory Dart fragment tree and its formatter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence

_ESCAPES: Dict[str, str] = {
    "\\": "\\\\",
    "'": "\\'",
    "$": "\\$",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def dart_string(value: str) -> str:
    """Return ``value`` as a single-quoted Dart string literal."""
    out: List[str] = []
    for char in value:
        if char in _ESCAPES:
            out.append(_ESCAPES[char])
        elif ord(char) < 0x20:
            out.append(f"\\u{{{ord(char):x}}}")
        else:
            out.append(char)
    return "'" + "".join(out) + "'"


def dart_string_map(entries: Mapping[str, str], *, indent: str = "  ") -> str:
    """Render a ``Map<String, String>`` literal, one entry per line."""
    if not entries:
        return "<String, String>{}"
    lines = ["{"]
    for key in sorted(entries):
        lines.append(f"{indent}{dart_string(key)}: {dart_string(entries[key])},")
    lines.append("}")
    return "\n".join(lines)


@dataclass
class DartField:
    """A field declaration; ``value`` may span several lines."""

    name: str
    value: Optional[str] = None
    type: Optional[str] = None
    modifier: str = "final"

    def render(self) -> str:
        parts = [self.modifier]
        if self.type:
            parts.append(self.type)
        parts.append(self.name)
        declaration = " ".join(parts)
        if self.value is None:
            return f"{declaration};"
        return f"{declaration} = {self.value};"


@dataclass
class DartMethod:
    """A method or getter with either an expression body or block statements."""

    signature: str
    expression: Optional[str] = None
    statements: List[str] = field(default_factory=list)

    def render(self, indent: str) -> str:
        if self.expression is not None:
            return f"{self.signature} => {self.expression};"
        body = [f"{indent}{line}" if line else "" for line in self.statements]
        return "\n".join([f"{self.signature} {{", *body, "}"])


@dataclass
class DartClass:
    """A top-level Dart class: constructor, fields, then methods."""

    name: str
    constructor: Optional[str] = None
    fields: List[DartField] = field(default_factory=list)
    methods: List[DartMethod] = field(default_factory=list)


class DartFormatter:
    """Serializes :class:`DartClass` trees into source text."""

    def __init__(self, indent: str = "  ") -> None:
        self.indent = indent

    def format_class(self, dart_class: DartClass) -> str:
        sections: List[List[str]] = []
        if dart_class.constructor:
            sections.append([dart_class.constructor])
        if dart_class.fields:
            sections.append([item.render() for item in dart_class.fields])
        if dart_class.methods:
            sections.append([item.render(self.indent) for item in dart_class.methods])

        body: List[str] = []
        for section in sections:
            if body:
                body.append("")
            body.extend(self._join_members(section))

        lines = [f"class {dart_class.name} {{"]
        lines.extend(self._indent(line) for line in body)
        lines.append("}")
        return "\n".join(lines)

    def format_classes(self, classes: Sequence[DartClass]) -> str:
        return "\n\n".join(self.format_class(item) for item in classes)

    def _join_members(self, members: Sequence[str]) -> List[str]:
        # Multi-line members get a blank line on each side.
        lines: List[str] = []
        previous_multiline = False
        for index, member in enumerate(members):
            multiline = "\n" in member
            if index and (multiline or previous_multiline):
                lines.append("")
            lines.extend(member.split("\n"))
            previous_multiline = multiline
        return lines

    def _indent(self, line: str) -> str:
        return f"{self.indent}{line}" if line else ""


__all__ = [
    "DartClass",
    "DartField",
    "DartFormatter",
    "DartMethod",
    "dart_string",
    "dart_string_map",
]
