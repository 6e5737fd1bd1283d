"""Pipeline orchestration: options, discovery, generation, emission."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Optional

from .config import (
    ConfigError,
    GeneratorOptions,
    build_extensions,
    load_options,
    output_file,
    validate_options,
)
from .discovery import AssetDiscoverer, asset_paths_from_manifest, load_manifest, patterns_for
from .emitter import MATERIAL_IMPORT, Emitter, build_root_class
from .generators import (
    ImageAssetClassGenerator,
    StringsClassGenerator,
    SvgAssetClassGenerator,
    read_localization_files,
)
from .logging import get_logger
from .models import AssetRef, GeneratedFragment
from .project import ProjectFiles


@dataclass
class BuildOutcome:
    """Result of a generation run that produced content."""

    path: Path
    content: str
    dry_run: bool


class ResourcesBuilder:
    """Generates r.dart for one project."""

    def __init__(
        self,
        files: ProjectFiles,
        discoverer: AssetDiscoverer | None = None,
        emitter: Emitter | None = None,
    ) -> None:
        self.files = files
        self.discoverer = discoverer or AssetDiscoverer(files)
        self.emitter = emitter or Emitter()
        self.logger = get_logger("builder")

    def build(self, *, dry_run: bool = False, strict: bool = False) -> Optional[BuildOutcome]:
        """Run one generation pass.

        Returns ``None`` when nothing was generated: an empty manifest, an
        unusable configuration (logged, re-raised with ``strict``) or empty
        output. Manifest and localization failures propagate.
        """
        manifest = load_manifest(self.files)
        if not manifest:
            self.logger.debug("Manifest is empty; nothing to generate")
            return None

        try:
            options = load_options(self.files)
            validate_options(options)
        except ConfigError as exc:
            self.logger.error("%s", exc)
            if strict:
                raise
            return None

        content = self.generate(manifest, options)
        if not content:
            return None

        relative = output_file(options)
        target = self.files.root / relative
        if dry_run:
            self.logger.info("Dry run: %s not written", relative)
        else:
            self.files.write_text(relative, content)
            self.logger.info("Generated %s", relative)
        return BuildOutcome(path=target, content=content, dry_run=dry_run)

    def generate(self, manifest: Mapping[str, Any], options: GeneratorOptions) -> str:
        """Return the generated file text for ``manifest`` under ``options``."""
        assets = self.discover(manifest)

        images = ImageAssetClassGenerator(assets)
        svg = SvgAssetClassGenerator(assets)
        fragments: List[GeneratedFragment] = [images.fragment(), svg.fragment()]

        localization: Optional[GeneratedFragment] = None
        strings_class: Optional[str] = None
        imports: List[str] = []
        if options.generate_strings:
            locales = list(options.supported_locales)
            if options.fallback_locale not in locales:
                locales.append(options.fallback_locale)
            strings = StringsClassGenerator(
                localization_data=read_localization_files(self.files, locales),
                supported_locales=options.supported_locales,
                fallback_locale=options.fallback_locale,
            )
            localization = strings.fragment()
            strings_class = strings.class_name
            imports.append(MATERIAL_IMPORT)

        root = build_root_class(images.class_name, svg.class_name, strings_class)
        return self.emitter.emit(root, fragments, localization, imports)

    def discover(self, manifest: Mapping[str, Any]) -> List[AssetRef]:
        patterns = patterns_for(asset_paths_from_manifest(manifest))
        assets = self.discoverer.discover(patterns)
        if not assets:
            self.logger.info("No assets discovered; generating empty asset classes")
        else:
            self.logger.debug("Discovered %d assets from %d patterns", len(assets), len(patterns))
        return assets

    def declared_outputs(self) -> List[str]:
        """Output paths advertised to the host build system."""
        options = load_options(self.files)
        return [output for outputs in build_extensions(options).values() for output in outputs]


__all__ = ["BuildOutcome", "ResourcesBuilder"]
