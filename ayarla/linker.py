"""Creation of symlinks from a settings directory into a base directory."""

from __future__ import annotations

import enum
import os
import shutil
from pathlib import Path

from ayarla.preflight import Manifest


class Status(enum.Enum):
    """Outcome of linking a manifest."""

    OK = "ok"
    WARN = "warn"


def _remove(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def link_manifest(base_path: str | Path, settings_dir_path: str | Path, manifest: Manifest) -> Status:
    """Link every manifest item's source into ``base_path``.

    Missing sources are skipped and turn the result into ``Status.WARN``.
    Existing destinations are kept unless the item is forced.
    """
    base_path = Path(base_path)
    settings_dir_path = Path(settings_dir_path)
    status = Status.OK

    for item in manifest.manifest_items:
        source_path = settings_dir_path / item.source
        if not source_path.exists():
            status = Status.WARN
            continue

        destination_path = base_path / item.destination
        if destination_path.exists():
            if not item.force:
                continue
            _remove(destination_path)

        parent = destination_path.parent
        if not parent.exists():
            parent.mkdir(parents=True)

        original = source_path.resolve(strict=True)
        os.symlink(original, destination_path)

    return status