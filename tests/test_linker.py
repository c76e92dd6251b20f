import os

import pytest

from ayarla.linker import Status, link_manifest
from ayarla.preflight import Manifest, ManifestItem


def _manifest(force=False):
    return Manifest(
        [
            ManifestItem(source=".tmux.conf", destination=".tmux.conf", force=force),
            ManifestItem(source="nvim", destination=".config/nvim", force=force),
        ]
    )


@pytest.fixture
def dirs(tmp_path):
    settings = tmp_path / "settings_dir"
    settings.mkdir()
    home = tmp_path / "home"
    home.mkdir()
    return settings, home


def test_missing_items_nothing_happens_and_warn(dirs):
    settings, home = dirs
    result = link_manifest(home, settings, _manifest())
    assert result is Status.WARN
    assert list(home.iterdir()) == []


def test_one_item_exists_tmux_configured_but_warn(dirs):
    settings, home = dirs
    (settings / ".tmux.conf").touch()

    result = link_manifest(home, settings, _manifest())

    assert result is Status.WARN
    entries = list(home.iterdir())
    assert [entry.name for entry in entries] == [".tmux.conf"]
    assert entries[0].is_symlink()


def test_everything_configured_and_ok(dirs):
    settings, home = dirs
    (settings / "nvim").mkdir()
    (settings / ".tmux.conf").touch()
    (settings / "nvim" / ".nvim").touch()

    result = link_manifest(home, settings, _manifest())

    assert result is Status.OK
    tmux = home / ".tmux.conf"
    assert tmux.is_symlink()
    assert os.readlink(tmux) == str((settings / ".tmux.conf").resolve())
    config = home / ".config"
    assert config.is_dir() and not config.is_symlink()
    config_entries = list(config.iterdir())
    assert [entry.name for entry in config_entries] == ["nvim"]
    assert config_entries[0].is_symlink()
    assert (config / "nvim" / ".nvim").exists()


def test_existing_destination_kept_without_force(dirs):
    settings, home = dirs
    (settings / ".tmux.conf").write_text("new")
    (home / ".tmux.conf").write_text("old")

    result = link_manifest(home, settings, Manifest([ManifestItem(".tmux.conf", ".tmux.conf")]))

    assert result is Status.OK
    assert not (home / ".tmux.conf").is_symlink()
    assert (home / ".tmux.conf").read_text() == "old"


def test_existing_destinations_replaced_with_force(dirs):
    settings, home = dirs
    (settings / ".tmux.conf").write_text("new")
    (settings / "nvim").mkdir()
    (home / ".tmux.conf").write_text("old")
    (home / ".config" / "nvim").mkdir(parents=True)
    (home / ".config" / "nvim" / "stale").touch()

    result = link_manifest(home, settings, _manifest(force=True))

    assert result is Status.OK
    assert (home / ".tmux.conf").is_symlink()
    assert (home / ".tmux.conf").read_text() == "new"
    assert (home / ".config" / "nvim").is_symlink()
    assert not (home / ".config" / "nvim" / "stale").exists()