"""Generator options loading for resgen (r_options.yaml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence, Tuple

import yaml

from .logging import get_logger

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .project import ProjectFiles

OPTIONS_FILE_NAME = "r_options.yaml"
OUTPUT_FILE_NAME = "r.dart"

DEFAULT_GENERATED_CLASS_PATH = "lib"
DEFAULT_SOURCE_FILES_DIR = "lib/"
DEFAULT_SUPPORTED_LOCALES: Tuple[str, ...] = ("en",)
DEFAULT_FALLBACK_LOCALE = "en"

_logger = get_logger("config")


class ConfigError(RuntimeError):
    """Raised when generator options are unusable for a run."""


@dataclass(frozen=True)
class GeneratorOptions:
    """Options for a single generation pass."""

    path: str = DEFAULT_GENERATED_CLASS_PATH
    generate_strings: bool = False
    supported_locales: Tuple[str, ...] = DEFAULT_SUPPORTED_LOCALES
    fallback_locale: str = DEFAULT_FALLBACK_LOCALE


def resolve_options(raw_text: str | None) -> GeneratorOptions:
    """Resolve options from the text of r_options.yaml.

    Absent or blank text yields the defaults. Each option falls back to its
    default independently; unknown keys are ignored.
    """
    if raw_text is None or not raw_text.strip():
        return GeneratorOptions()

    try:
        data = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {OPTIONS_FILE_NAME}: {exc}") from exc
    if data is None:
        return GeneratorOptions()
    if not isinstance(data, dict):
        raise ConfigError(f"{OPTIONS_FILE_NAME} must contain a mapping at the root")

    path = _as_str(data.get("path"))
    generate_strings = _as_bool(data.get("generate_strings"))
    supported_locales = _unique(_as_str_list(data.get("supported_locales")))
    fallback_locale = _as_str(data.get("fallback_locale"))

    locales = tuple(supported_locales) or DEFAULT_SUPPORTED_LOCALES
    fallback = fallback_locale or DEFAULT_FALLBACK_LOCALE
    if fallback not in locales:
        _logger.warning(
            "Fallback locale %r is not listed in supported_locales; adding it", fallback
        )
        locales = locales + (fallback,)

    return GeneratorOptions(
        path=_normalise_path(path) if path else DEFAULT_GENERATED_CLASS_PATH,
        generate_strings=generate_strings if generate_strings is not None else False,
        supported_locales=locales,
        fallback_locale=fallback,
    )


def load_options(files: "ProjectFiles") -> GeneratorOptions:
    """Read r_options.yaml through ``files`` and resolve it."""
    try:
        text = files.read_optional(OPTIONS_FILE_NAME)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {OPTIONS_FILE_NAME}: {exc}") from exc
    return resolve_options(text)


def is_path_valid(options: GeneratorOptions) -> bool:
    """Return True when the output directory lives under the Dart source root."""
    path = options.path
    if path == DEFAULT_GENERATED_CLASS_PATH:
        return True
    if not path.startswith(DEFAULT_SOURCE_FILES_DIR):
        return False
    return ".." not in PurePosixPath(path).parts


def validate_options(options: GeneratorOptions) -> None:
    """Raise ``ConfigError`` when ``options`` cannot produce an output file."""
    if not is_path_valid(options):
        raise ConfigError(
            f'path from {OPTIONS_FILE_NAME} should start with "{DEFAULT_SOURCE_FILES_DIR}"'
            f" (got {options.path!r})"
        )


def output_file(options: GeneratorOptions) -> str:
    """Return the project-relative path of the generated file."""
    directory = options.path if is_path_valid(options) else DEFAULT_GENERATED_CLASS_PATH
    return f"{directory}/{OUTPUT_FILE_NAME}"


def build_extensions(options: GeneratorOptions) -> Dict[str, List[str]]:
    """Map the whole-source-tree input to the single declared output."""
    output = OUTPUT_FILE_NAME
    if options.path != DEFAULT_GENERATED_CLASS_PATH and is_path_valid(options):
        output = f"{options.path[len(DEFAULT_SOURCE_FILES_DIR):]}/{OUTPUT_FILE_NAME}"
    return {"$lib$": [output]}


def _normalise_path(path: str) -> str:
    stripped = path.strip().rstrip("/")
    return stripped or DEFAULT_GENERATED_CLASS_PATH


def _unique(values: Sequence[str]) -> List[str]:
    seen: set[str] = set()
    result: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value.strip()] if value.strip() else []
    if isinstance(value, Sequence):
        return [item.strip() for item in value if isinstance(item, str) and item.strip()]
    return []


__all__ = [
    "ConfigError",
    "GeneratorOptions",
    "build_extensions",
    "is_path_valid",
    "load_options",
    "output_file",
    "resolve_options",
    "validate_options",
]
