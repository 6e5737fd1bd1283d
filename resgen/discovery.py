"""Asset discovery from the pubspec.yaml asset declarations."""

from __future__ import annotations

from fnmatch import fnmatchcase
from typing import TYPE_CHECKING, Any, Iterable, List, Mapping, Set

import yaml

from .logging import get_logger
from .models import AssetRef

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .project import ProjectFiles

MANIFEST_FILE_NAME = "pubspec.yaml"

_logger = get_logger("discovery")


class ManifestError(RuntimeError):
    """Raised when the project manifest cannot be read or parsed."""


def load_manifest(files: "ProjectFiles") -> Mapping[str, Any]:
    """Parse pubspec.yaml; an empty document yields an empty mapping."""
    try:
        text = files.read_text(MANIFEST_FILE_NAME)
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Failed to read {MANIFEST_FILE_NAME}: {exc}") from exc
    return parse_manifest(text)


def parse_manifest(text: str) -> Mapping[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ManifestError(f"Failed to parse {MANIFEST_FILE_NAME}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ManifestError(f"{MANIFEST_FILE_NAME} must contain a mapping at the root")
    return data


def asset_paths_from_manifest(manifest: Mapping[str, Any]) -> Set[str]:
    """Return the unique asset paths declared under ``flutter.assets``."""
    flutter = manifest.get("flutter")
    if not isinstance(flutter, dict):
        return set()
    declared = flutter.get("assets")
    if not isinstance(declared, list):
        return set()

    paths: Set[str] = set()
    for entry in declared:
        # Flavored assets are declared as mappings with a "path" key.
        if isinstance(entry, dict):
            entry = entry.get("path")
        if isinstance(entry, str) and entry.strip():
            paths.add(entry.strip())
    return paths


def patterns_for(paths: Iterable[str]) -> Set[str]:
    """Turn declared asset paths into deduplicated match patterns.

    A directory declaration (trailing ``/``) matches the directory and
    everything under it; anything else matches a file (or a glob) exactly.
    """
    patterns: Set[str] = set()
    for raw in paths:
        path = raw
        while path.startswith("./"):
            path = path[2:]
        if path.endswith("/"):
            patterns.add(f"{path}*")
        else:
            patterns.add(path)
    return patterns


class AssetDiscoverer:
    """Expands asset patterns against the files available in the project."""

    def __init__(self, files: "ProjectFiles") -> None:
        self._files = files

    def discover(self, patterns: Iterable[str]) -> List[AssetRef]:
        """Return the sorted, deduplicated assets matched by ``patterns``."""
        return discover_assets(patterns, self._files.list_files())


def discover_assets(patterns: Iterable[str], available: Iterable[str]) -> List[AssetRef]:
    candidates = list(available)
    present = set(candidates)
    found: Set[str] = set()
    for pattern in sorted(set(patterns)):
        # A declared file name may itself contain glob characters such as "[".
        if pattern in present:
            matches = [pattern]
        else:
            matches = [path for path in candidates if fnmatchcase(path, pattern)]
        if not matches:
            _logger.warning("Asset pattern matched no files: %s", pattern)
        found.update(matches)

    assets = [AssetRef(path) for path in sorted(found)]
    # Hidden/system artifacts (.DS_Store, .gitkeep) have no usable file name.
    visible = [asset for asset in assets if asset.stem]
    _logger.debug(
        "Discovered %d assets (%d hidden files skipped)",
        len(visible),
        len(assets) - len(visible),
    )
    return visible


__all__ = [
    "AssetDiscoverer",
    "ManifestError",
    "asset_paths_from_manifest",
    "discover_assets",
    "load_manifest",
    "parse_manifest",
    "patterns_for",
]
