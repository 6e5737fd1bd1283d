"""Class generators for file-based asset categories."""

from __future__ import annotations

from typing import Iterable, List, Set, Tuple

from ..dart import DartClass, DartField, DartFormatter, dart_string
from ..logging import get_logger
from ..models import IMAGE_EXTENSIONS, VECTOR_EXTENSIONS, AssetRef, GeneratedFragment, NamespaceNode
from ..naming import disambiguate, name_for, strip_asset_root, to_identifier

_logger = get_logger("generators.assets")


class AssetClassGenerator:
    """Builds one class per directory level for assets of a single category."""

    class_name = "Assets"
    extensions: Tuple[str, ...] = ()

    def __init__(self, assets: Iterable[AssetRef], formatter: DartFormatter | None = None) -> None:
        self.assets = sorted(asset for asset in assets if self.matches(asset))
        self.formatter = formatter or DartFormatter()

    def matches(self, asset: AssetRef) -> bool:
        return asset.extension in self.extensions

    def build_tree(self) -> NamespaceNode:
        """Arrange the matching assets into a tree mirroring their directories."""
        root = NamespaceNode(name=self.class_name)
        for asset in self.assets:
            node = root
            for segment in strip_asset_root(asset):
                node = node.child(segment)
            node.add_leaf(asset.file_name, asset)
        return root

    def build_classes(self) -> List[DartClass]:
        used: Set[str] = {self.class_name}
        return self._build_class(self.build_tree(), self.class_name, used)

    def generate(self) -> str:
        classes = self.build_classes()
        _logger.debug(
            "%s: %d assets across %d classes", self.class_name, len(self.assets), len(classes)
        )
        return self.formatter.format_classes(classes)

    def fragment(self) -> GeneratedFragment:
        return GeneratedFragment(class_name=self.class_name, source=self.generate())

    def _build_class(self, node: NamespaceNode, class_name: str, used: Set[str]) -> List[DartClass]:
        proposals = {
            raw: name_for(child.asset)[1] if child.asset else to_identifier(raw)
            for raw, child in node.children.items()
        }
        names = disambiguate(proposals)

        dart_class = DartClass(name=class_name, constructor=f"const {class_name}();")
        nested: List[Tuple[NamespaceNode, str]] = []
        for raw in sorted(node.children, key=lambda key: names[key]):
            child = node.children[raw]
            member = names[raw]
            if child.asset is not None:
                dart_class.fields.append(
                    DartField(name=member, type="String", value=dart_string(child.asset.path))
                )
                continue
            child_class = self._claim_class_name(class_name + _upper_first(member), used)
            dart_class.fields.append(
                DartField(name=member, type=child_class, value=f"const {child_class}()")
            )
            nested.append((child, child_class))

        classes = [dart_class]
        for child, child_class in nested:
            classes.extend(self._build_class(child, child_class, used))
        return classes

    @staticmethod
    def _claim_class_name(candidate: str, used: Set[str]) -> str:
        name = candidate
        suffix = 2
        while name in used:
            name = f"{candidate}{suffix}"
            suffix += 1
        used.add(name)
        return name


class ImageAssetClassGenerator(AssetClassGenerator):
    """Raster images decodable by Flutter's ``Image`` widget."""

    class_name = "ImageAssets"
    extensions = IMAGE_EXTENSIONS


class SvgAssetClassGenerator(AssetClassGenerator):
    """SVG vector graphics."""

    class_name = "SvgAssets"
    extensions = VECTOR_EXTENSIONS


def _upper_first(identifier: str) -> str:
    stripped = identifier.rstrip("_")
    return stripped[:1].upper() + stripped[1:]


__all__ = [
    "AssetClassGenerator",
    "ImageAssetClassGenerator",
    "SvgAssetClassGenerator",
]
