# ayarla

ayarla manages your dotfiles. You keep your settings in one directory,
together with a `manifest.toml`. ayarla reads the manifest and creates
symbolic links in your home directory. The links point back into the
settings directory.

Python 3.11 or later is required. The package needs nothing outside the
standard library.

## Installation

```
pip install .
```

## The settings directory

Before anything is linked, the settings directory is checked. It must:

- exist and be a directory;
- contain a `manifest.toml`;
- contain at least one other entry besides `manifest.toml`;
- have a `manifest.toml` that is not empty.

The manifest must have a `manifest_items` array. Each `[[manifest_items]]`
table in it describes one link:

```toml
[[manifest_items]]
source = ".tmux.conf"
destination = ".tmux.conf"

[[manifest_items]]
source = "nvim"
destination = ".config/nvim"
force = true
```

- `source` is a string giving a path relative to the settings directory. It is required.
- `destination` is a string giving a path relative to your home directory. It is required.
- `force` is an optional boolean and defaults to `false`.
  - When it is `true`, a file or directory already at the destination is removed and replaced by the link.
  - When it is `false`, an existing destination is left alone.

## How items are linked

- **Missing source:** the item is skipped, and the run ends with a warning status.
- **Missing parent directories:** any missing parent directories of a destination are created.
- **Link target:** each link points to the fully resolved path of its source.

## Usage

```
ayarla bootstrap --settings-directory ~/dotfiles
```

`lan` is a short alias for `bootstrap`, and `-s` is short for
`--settings-directory`:

```
ayarla lan -s ~/dotfiles
```

The `HOME` environment variable decides where links are created. If `HOME`
is not set, the command stops with an error.

Errors are printed to standard error as `Error: ...`, and the exit status is
1. Such errors include a settings directory that fails the checks, a manifest
that cannot be parsed, or a file system error.

Other commands:

- `ayarla --help` lists all options.
- `ayarla --version` (or `-V`) prints the version.

The `-v`/`--verbose` flag is accepted but does not change the output.

## Use from Python

```python
from ayarla.preflight import PreflightError, checks
from ayarla.linker import Status, link_manifest

try:
    settings_dir, manifest = checks("/path/to/dotfiles")
except PreflightError as exc:
    print(exc)
else:
    status = link_manifest("/home/me", settings_dir, manifest)
    if status is Status.WARN:
        print("some sources were missing")
```

### `ayarla.preflight`

- `inspect_settings_directory(path)` runs the directory checks. It returns a
  `SettingsDirectory` that holds `settings_dir_path` and the raw
  `manifest_content`.
- `parse_manifest(text)` turns TOML text into a `Manifest`. A `Manifest` has a
  `manifest_items` list of `ManifestItem` objects, each with `source`,
  `destination` and `force`.
- `checks(path)` does both steps and returns `(settings_dir_path, manifest)`.

Each of these raises `PreflightError` when the directory or the manifest is
not usable.

### `ayarla.linker`

- `link_manifest(base_path, settings_dir_path, manifest)` creates the links.
  It returns `Status.OK`, or `Status.WARN` if any source was missing.

## What it does not do

ayarla only creates links from an existing manifest. It has no command to:

- create a settings directory or a manifest;
- add entries to a manifest;
- remove links it has made.