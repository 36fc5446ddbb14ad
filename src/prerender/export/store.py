"""Asset store — the compilation's name -> content table.

The traversal only ever asks two questions of a store: does this asset
exist, and please add it.  Nothing is deleted or overwritten, which makes the
store double as the crawl's visited set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from prerender._errors import StorageError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from prerender._types import AssetContent, AssetName


class AssetStore(Protocol):
    """What the traversal needs from a store."""

    def has(self, name: AssetName) -> bool: ...

    def add(self, name: AssetName, content: AssetContent) -> None: ...


class MemoryAssetStore:
    """In-memory asset store with first-writer-wins semantics.

    Assets present at construction are build output; everything added
    afterwards is tracked as generated, in insertion order.

    Args:
        initial: Build assets to seed the store with.

    """

    __slots__ = ("_assets", "_generated")

    def __init__(self, initial: dict[AssetName, AssetContent] | None = None) -> None:
        self._assets: dict[AssetName, AssetContent] = dict(initial or {})
        self._generated: list[AssetName] = []

    def has(self, name: AssetName) -> bool:
        return name in self._assets

    def add(self, name: AssetName, content: AssetContent) -> None:
        """Insert a new asset.

        Raises:
            StorageError: If *name* already exists or *content* is not text or bytes.

        """
        if not isinstance(content, (str, bytes)):
            msg = (
                f"Asset {name!r} must be str or bytes, got {type(content).__name__}"
            )
            raise StorageError(msg)
        if name in self._assets:
            msg = f"Asset {name!r} already exists"
            raise StorageError(msg)
        self._assets[name] = content
        self._generated.append(name)

    def get(self, name: AssetName) -> AssetContent | None:
        return self._assets.get(name)

    @property
    def generated(self) -> tuple[AssetName, ...]:
        """Names added since construction, in insertion order."""
        return tuple(self._generated)

    def __contains__(self, name: object) -> bool:
        return name in self._assets

    def __getitem__(self, name: AssetName) -> AssetContent:
        return self._assets[name]

    def __iter__(self) -> Iterator[AssetName]:
        return iter(self._assets)

    def __len__(self) -> int:
        return len(self._assets)
