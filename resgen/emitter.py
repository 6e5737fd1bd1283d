"""Assembles generated fragments into the final r.dart text."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader

from .dart import DartClass, DartField, DartFormatter, DartMethod
from .models import GeneratedFragment

ROOT_CLASS_NAME = "R"
MATERIAL_IMPORT = "import 'package:flutter/material.dart';"

GENERATED_FILE_HEADER = "/// THIS FILE IS GENERATED BY resgen. DO NOT MODIFY MANUALLY."

# Lint rules the generated file is allowed to break.
IGNORE_COMMENT_FOR_LINTER = (
    "// ignore_for_file: "
    "avoid_classes_with_only_static_members,"
    "always_specify_types,"
    "lines_longer_than_80_chars,"
    "non_constant_identifier_names,"
    "prefer_double_quotes,"
    "unnecessary_raw_strings,"
    "use_raw_strings"
)

_TEMPLATE_NAME = "r.dart.j2"


def build_root_class(
    images_class: str,
    svg_class: str,
    strings_class: Optional[str] = None,
) -> DartClass:
    """Return the ``R`` class exposing one static handle per category."""
    root = DartClass(
        name=ROOT_CLASS_NAME,
        fields=[
            DartField(name="images", value=f"{images_class}()", modifier="static const"),
            DartField(name="svg", value=f"{svg_class}()", modifier="static const"),
        ],
    )
    if strings_class:
        root.methods.append(
            DartMethod(
                signature=f"static {strings_class} stringsOf(BuildContext context)",
                expression=f"{strings_class}.of(context)",
            )
        )
    return root


class Emitter:
    """Renders the output file in a fixed order through a jinja2 template."""

    def __init__(
        self,
        *,
        header: str = GENERATED_FILE_HEADER,
        lint_banner: str = IGNORE_COMMENT_FOR_LINTER,
        formatter: DartFormatter | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        self.header = header
        self.lint_banner = lint_banner
        self.formatter = formatter or DartFormatter()
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def emit(
        self,
        root_class: DartClass,
        fragments: Sequence[GeneratedFragment],
        localization: Optional[GeneratedFragment] = None,
        imports: Sequence[str] = (),
    ) -> str:
        ordered: List[GeneratedFragment] = list(fragments)
        if localization is not None:
            ordered.append(localization)
        template = self._env.get_template(_TEMPLATE_NAME)
        return template.render(
            header=self.header,
            lint_banner=self.lint_banner,
            imports=list(imports),
            root_class=self.formatter.format_class(root_class),
            fragments=ordered,
        )


__all__ = [
    "Emitter",
    "GENERATED_FILE_HEADER",
    "IGNORE_COMMENT_FOR_LINTER",
    "MATERIAL_IMPORT",
    "ROOT_CLASS_NAME",
    "build_root_class",
]
