"""Static output — write generated assets to the output directory.

Only assets generated during the render pass are written; build assets that
were loaded into the store are left where the build put them.
"""

from __future__ import annotations

import shutil
import time
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from prerender._errors import ExportError

if TYPE_CHECKING:
    from prerender.export.store import MemoryAssetStore


@dataclass(frozen=True, slots=True)
class ExportedFile:
    """Record of a single file written during export.

    Attributes:
        asset_name: Store key (e.g., ``"docs/intro/index.html"``).
        output_path: Absolute filesystem path to the written file.
        size_bytes: Size of the written file in bytes.
        duration_ms: Time taken to write this file.

    """

    asset_name: str
    output_path: Path
    size_bytes: int
    duration_ms: float


@dataclass(frozen=True, slots=True)
class ExportResult:
    """Aggregate result of a full render pass.

    Attributes:
        files: All files written during export.
        errors: Formatted tracebacks of every failure recorded in the pass.
        duration_ms: Total wall-clock time for the build.
        output_dir: Absolute path to the output directory.
        render_calls: Number of successful render calls.
        skipped: Outputs dropped because their asset name already existed.

    """

    files: tuple[ExportedFile, ...]
    errors: tuple[str, ...]
    duration_ms: float
    output_dir: Path
    render_calls: int = 0
    skipped: int = 0

    @property
    def total_pages(self) -> int:
        return len(self.files)


def write_generated(store: MemoryAssetStore, output_dir: Path) -> list[ExportedFile]:
    """Clean *output_dir* and write every generated asset into it.

    Raises:
        ExportError: If an asset name escapes the output directory or a
            file cannot be written.

    """
    _clean_output(output_dir)
    root = output_dir.resolve()

    results: list[ExportedFile] = []
    for name in store.generated:
        t0 = time.perf_counter()
        filepath = _asset_to_filepath(name, root)
        try:
            size = _write_asset(filepath, store[name])
        except OSError as exc:
            msg = f"Failed to write asset {name!r} to {filepath}: {exc}"
            raise ExportError(msg) from exc
        elapsed = (time.perf_counter() - t0) * 1000
        results.append(ExportedFile(
            asset_name=name,
            output_path=filepath,
            size_bytes=size,
            duration_ms=elapsed,
        ))
    return results


def _clean_output(output_dir: Path) -> None:
    """Remove and recreate the output directory."""
    if output_dir.exists():
        shutil.rmtree(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)


def _asset_to_filepath(name: str, root: Path) -> Path:
    """Resolve an asset name under *root*, refusing names that escape it.

    ``"index.html"``           -> ``root/index.html``
    ``"docs/intro/index.html"`` -> ``root/docs/intro/index.html``
    ``"../x/index.html"``       -> ExportError

    """
    relative = PurePosixPath(name.replace("\\", "/").lstrip("/"))
    filepath = (root / relative).resolve()
    if not filepath.is_relative_to(root):
        msg = f"Asset name {name!r} resolves outside the output directory"
        raise ExportError(msg)
    return filepath


def _write_asset(filepath: Path, content: str | bytes) -> int:
    """Write an asset, creating parent dirs as needed.

    Returns the size in bytes of the written file.

    """
    filepath.parent.mkdir(parents=True, exist_ok=True)
    data = content.encode("utf-8") if isinstance(content, str) else content
    filepath.write_bytes(data)
    return len(data)
