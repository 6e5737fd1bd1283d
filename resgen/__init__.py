"""resgen: typed Dart accessors for Flutter assets and localized strings."""

from __future__ import annotations

from .builder import BuildOutcome, ResourcesBuilder
from .config import ConfigError, GeneratorOptions, is_path_valid, resolve_options
from .discovery import AssetDiscoverer, ManifestError
from .emitter import Emitter
from .generators import LocalizationError
from .models import AssetRef, GeneratedFragment, NamespaceNode
from .naming import name_for
from .project import ProjectFiles

__version__ = "0.1.0"

__all__ = [
    "AssetDiscoverer",
    "AssetRef",
    "BuildOutcome",
    "ConfigError",
    "Emitter",
    "GeneratedFragment",
    "GeneratorOptions",
    "LocalizationError",
    "ManifestError",
    "NamespaceNode",
    "ProjectFiles",
    "ResourcesBuilder",
    "is_path_valid",
    "name_for",
    "resolve_options",
]
