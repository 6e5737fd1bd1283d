"""Core data models shared across resgen components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Tuple

IMAGE_EXTENSIONS: Tuple[str, ...] = (".png", ".jpg", ".jpeg", ".gif", ".webp", ".bmp", ".wbmp")
VECTOR_EXTENSIONS: Tuple[str, ...] = (".svg",)


@dataclass(frozen=True, order=True)
class AssetRef:
    """A discovered asset file, addressed by its package-relative POSIX path."""

    path: str

    def __post_init__(self) -> None:
        if not self.path or self.path.endswith("/"):
            raise ValueError(f"Asset path must name a file: {self.path!r}")

    @property
    def parts(self) -> Tuple[str, ...]:
        return tuple(part for part in self.path.split("/") if part)

    @property
    def segments(self) -> Tuple[str, ...]:
        """Directory segments leading to the file."""
        return self.parts[:-1]

    @property
    def file_name(self) -> str:
        return self.parts[-1]

    @property
    def stem(self) -> str:
        """File name without its last extension; empty for dot-files."""
        name = self.file_name
        if "." not in name:
            return name
        return name.rsplit(".", 1)[0]

    @property
    def extension(self) -> str:
        name = self.file_name
        if "." not in name:
            return ""
        return "." + name.rsplit(".", 1)[1].lower()

    @property
    def category(self) -> str:
        if self.extension in IMAGE_EXTENSIONS:
            return "image"
        if self.extension in VECTOR_EXTENSIONS:
            return "vector"
        return "other"


@dataclass
class NamespaceNode:
    """One level of the generated class hierarchy.

    ``children`` is keyed by the raw segment (directory name or file name) so
    identifiers can be assigned later from the complete sibling set. Existing
    children are never replaced: a leaf whose file name is already taken is
    keyed by its full path, and a directory shadowed by a leaf gets a trailing
    ``/``.
    """

    name: str
    children: Dict[str, "NamespaceNode"] = field(default_factory=dict)
    asset: Optional[AssetRef] = None

    @property
    def is_leaf(self) -> bool:
        return self.asset is not None

    def child(self, name: str) -> "NamespaceNode":
        """Return the namespace child ``name``, creating it when missing."""
        node = self.children.get(name)
        if node is not None and node.is_leaf:
            name = f"{name}/"
            node = self.children.get(name)
        if node is None:
            node = NamespaceNode(name=name)
            self.children[name] = node
        return node

    def add_leaf(self, name: str, asset: AssetRef) -> "NamespaceNode":
        key = name if name not in self.children else asset.path
        suffix = 2
        while key in self.children:
            key = f"{asset.path}#{suffix}"
            suffix += 1
        node = NamespaceNode(name=key, asset=asset)
        self.children[key] = node
        return node

    def iter_assets(self) -> Iterator[AssetRef]:
        if self.asset is not None:
            yield self.asset
        for name in sorted(self.children):
            yield from self.children[name].iter_assets()


@dataclass(frozen=True)
class GeneratedFragment:
    """A self-contained unit of generated source and the symbol it exposes."""

    class_name: str
    source: str
