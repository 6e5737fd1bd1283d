"""Generators producing one Dart fragment per asset category."""

from __future__ import annotations

from .assets import AssetClassGenerator, ImageAssetClassGenerator, SvgAssetClassGenerator
from .strings import (
    LocalizationError,
    StringsClassGenerator,
    read_localization_files,
    resolve_value,
)

__all__ = [
    "AssetClassGenerator",
    "ImageAssetClassGenerator",
    "LocalizationError",
    "StringsClassGenerator",
    "SvgAssetClassGenerator",
    "read_localization_files",
    "resolve_value",
]
