"""Validation of a settings directory and parsing of its manifest."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

MANIFEST_FILE_NAME = "manifest.toml"


class PreflightError(Exception):
    """Raised when a settings directory or its manifest is unusable."""


@dataclass(frozen=True)
class ManifestItem:
    """One entry of the manifest: what to link and where."""

    source: str
    destination: str
    force: bool = False

    @classmethod
    def from_table(cls, table: Any) -> ManifestItem:
        if not isinstance(table, dict):
            raise PreflightError("Failed to parse manifest: manifest item is not a table")
        for key in ("source", "destination"):
            if key not in table:
                raise PreflightError(f"Failed to parse manifest: missing field `{key}`")
            if not isinstance(table[key], str):
                raise PreflightError(
                    f"Failed to parse manifest: field `{key}` must be a string"
                )
        force = table.get("force", False)
        if not isinstance(force, bool):
            raise PreflightError("Failed to parse manifest: field `force` must be a boolean")
        return cls(source=table["source"], destination=table["destination"], force=force)


@dataclass(frozen=True)
class Manifest:
    """The parsed content of ``manifest.toml``."""

    manifest_items: list[ManifestItem]


@dataclass(frozen=True)
class SettingsDirectory:
    """A settings directory that passed inspection, with its raw manifest."""

    settings_dir_path: Path
    manifest_content: str


def inspect_settings_directory(settings_directory: str | Path) -> SettingsDirectory:
    """Check that the directory exists and holds a non-empty manifest besides other files."""
    path = Path(settings_directory)

    if not path.exists():
        raise PreflightError(f"Directory does not exist: {settings_directory}")
    if not path.is_dir():
        raise PreflightError(f"Path is not a directory: {settings_directory}")

    entry_names = [entry.name for entry in path.iterdir()]
    if not entry_names:
        raise PreflightError(f"Directory is empty: {settings_directory}")
    if MANIFEST_FILE_NAME not in entry_names:
        raise PreflightError(
            f"Directory does not contain {MANIFEST_FILE_NAME}: {settings_directory}"
        )
    if len(entry_names) == 1:
        raise PreflightError(
            f"Directory only contains {MANIFEST_FILE_NAME}: {settings_directory}"
        )

    manifest_content = (path / MANIFEST_FILE_NAME).read_text(encoding="utf-8")
    if not manifest_content:
        raise PreflightError(f"{MANIFEST_FILE_NAME} in {settings_directory} is empty")

    return SettingsDirectory(settings_dir_path=path, manifest_content=manifest_content)


def parse_manifest(manifest_content: str) -> Manifest:
    """Parse TOML manifest content into a :class:`Manifest`."""
    try:
        data = tomllib.loads(manifest_content)
    except tomllib.TOMLDecodeError as exc:
        raise PreflightError(f"Failed to parse manifest: {exc}") from exc

    if "manifest_items" not in data:
        raise PreflightError("Failed to parse manifest: missing field `manifest_items`")
    items = data["manifest_items"]
    if not isinstance(items, list):
        raise PreflightError("Failed to parse manifest: `manifest_items` must be an array")
    return Manifest(manifest_items=[ManifestItem.from_table(item) for item in items])


def checks(settings_directory: str | Path) -> tuple[Path, Manifest]:
    """Inspect the settings directory and return its path with the parsed manifest."""
    inspected = inspect_settings_directory(settings_directory)
    manifest = parse_manifest(inspected.manifest_content)
    return inspected.settings_dir_path, manifest