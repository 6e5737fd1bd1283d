"""Localized string accessor generation."""

from __future__ import annotations

import json
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Dict, List, Mapping, Optional, Sequence

from ..dart import DartClass, DartField, DartFormatter, DartMethod, dart_string, dart_string_map
from ..logging import get_logger
from ..models import GeneratedFragment
from ..naming import disambiguate, to_identifier

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..project import ProjectFiles

STRINGS_DIR = "assets/strings"

# Member names the generated class already defines.
_RESERVED_MEMBERS = ("locale", "of", "supportedLocales")

_logger = get_logger("generators.strings")


class LocalizationError(RuntimeError):
    """Raised when a locale's string table is missing or malformed."""


def locale_file(locale: str) -> str:
    return f"{STRINGS_DIR}/{locale}.json"


def parse_table(locale: str, text: str) -> Dict[str, str]:
    """Decode one locale table, which must be a flat object of strings."""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise LocalizationError(f"Failed to parse {locale_file(locale)}: {exc}") from exc
    if not isinstance(payload, dict):
        raise LocalizationError(f"{locale_file(locale)} must contain a JSON object")
    invalid = sorted(key for key, value in payload.items() if not isinstance(value, str))
    if invalid:
        raise LocalizationError(
            f"{locale_file(locale)} has non-string values for: {', '.join(invalid)}"
        )
    return dict(payload)


def read_localization_files(
    files: "ProjectFiles", locales: Sequence[str]
) -> Dict[str, Dict[str, str]]:
    """Read every locale table; all reads finish before this returns."""

    def _read(locale: str) -> Dict[str, str]:
        try:
            text = files.read_text(locale_file(locale))
        except (OSError, UnicodeDecodeError) as exc:
            raise LocalizationError(f"Failed to read {locale_file(locale)}: {exc}") from exc
        return parse_table(locale, text)

    if not locales:
        return {}
    with ThreadPoolExecutor(max_workers=min(len(locales), 8)) as executor:
        tables = list(executor.map(_read, locales))
    return dict(zip(locales, tables))


def resolve_value(
    localization_data: Mapping[str, Mapping[str, str]],
    fallback_locale: str,
    locale: str,
    key: str,
) -> Optional[str]:
    """Mirror of the generated runtime lookup."""
    value = localization_data.get(locale, {}).get(key)
    if value is not None:
        return value
    return localization_data.get(fallback_locale, {}).get(key)


class StringsClassGenerator:
    """Emits a ``Strings`` class resolving keys for the active locale at runtime."""

    class_name = "Strings"

    def __init__(
        self,
        localization_data: Mapping[str, Mapping[str, str]],
        supported_locales: Sequence[str],
        fallback_locale: str,
        formatter: DartFormatter | None = None,
    ) -> None:
        self.localization_data = localization_data
        self.supported_locales = list(supported_locales)
        self.fallback_locale = fallback_locale
        self.formatter = formatter or DartFormatter()

    @property
    def locales(self) -> List[str]:
        """Supported locales, always including the fallback."""
        locales = list(self.supported_locales)
        if self.fallback_locale not in locales:
            locales.append(self.fallback_locale)
        return locales

    def validate(self) -> None:
        """Check table coverage against the fallback locale."""
        missing = [locale for locale in self.locales if locale not in self.localization_data]
        if missing:
            raise LocalizationError(f"No string table for locale(s): {', '.join(missing)}")

        reference = set(self.localization_data[self.fallback_locale])
        for locale in self.locales:
            if locale == self.fallback_locale:
                continue
            keys = set(self.localization_data[locale])
            extra = sorted(keys - reference)
            if extra:
                _logger.warning(
                    "Locale %s defines keys missing from fallback %s; ignoring: %s",
                    locale,
                    self.fallback_locale,
                    ", ".join(extra),
                )
            absent = sorted(reference - keys)
            if absent:
                _logger.debug(
                    "Locale %s falls back to %s for: %s",
                    locale,
                    self.fallback_locale,
                    ", ".join(absent),
                )

    def accessor_names(self) -> Dict[str, str]:
        """Map each fallback key to its getter name."""
        keys = self.localization_data[self.fallback_locale]
        return disambiguate(
            {key: to_identifier(key) for key in keys},
            reserved=_RESERVED_MEMBERS,
        )

    def build_class(self) -> DartClass:
        self.validate()
        names = self.accessor_names()
        reference = self.localization_data[self.fallback_locale]

        values_lines = ["{"]
        for locale in self.locales:
            table = {
                key: value
                for key, value in self.localization_data[locale].items()
                if key in reference
            }
            entry = dart_string_map(table).split("\n")
            values_lines.append(f"  {dart_string(locale)}: {entry[0]}")
            values_lines.extend(f"  {line}" for line in entry[1:])
            values_lines[-1] += ","
        values_lines.append("}")

        locales_lines = ["["]
        locales_lines.extend(
            f"  Locale({', '.join(dart_string(part) for part in _locale_parts(locale))}),"
            for locale in self.locales
        )
        locales_lines.append("]")

        getters = [
            DartMethod(
                signature=f"String get {names[key]}",
                expression=f"_lookup({dart_string(key)})",
            )
            for key in sorted(names, key=lambda item: names[item])
        ]

        return DartClass(
            name=self.class_name,
            constructor=f"const {self.class_name}._(this.locale);",
            fields=[
                DartField(name="locale", type="String"),
                DartField(
                    name="_fallbackLocale",
                    type="String",
                    value=dart_string(self.fallback_locale),
                    modifier="static const",
                ),
                DartField(
                    name="supportedLocales",
                    type="List<Locale>",
                    value="\n".join(locales_lines),
                    modifier="static const",
                ),
                DartField(
                    name="_values",
                    type="Map<String, Map<String, String>>",
                    value="\n".join(values_lines),
                    modifier="static const",
                ),
            ],
            methods=[
                *getters,
                DartMethod(
                    signature=f"static {self.class_name} of(BuildContext context)",
                    statements=[
                        "final active = Localizations.localeOf(context);",
                        "for (final candidate in [active.toString(), active.languageCode]) {",
                        "  if (_values.containsKey(candidate)) {",
                        f"    return {self.class_name}._(candidate);",
                        "  }",
                        "}",
                        f"return const {self.class_name}._(_fallbackLocale);",
                    ],
                ),
                DartMethod(
                    signature="String _lookup(String key)",
                    expression="_values[locale]?[key] ?? _values[_fallbackLocale]![key]!",
                ),
            ],
        )

    def generate(self) -> str:
        dart_class = self.build_class()
        _logger.debug(
            "Generated %d string accessors for %d locales",
            len(dart_class.methods) - 2,
            len(self.locales),
        )
        return self.formatter.format_class(dart_class)

    def fragment(self) -> GeneratedFragment:
        return GeneratedFragment(class_name=self.class_name, source=self.generate())


def _locale_parts(locale: str) -> List[str]:
    return [part for part in locale.replace("-", "_").split("_") if part][:2]


__all__ = [
    "LocalizationError",
    "StringsClassGenerator",
    "locale_file",
    "parse_table",
    "read_localization_files",
    "resolve_value",
]
