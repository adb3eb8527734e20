"""Removal of version-control leftovers from a fresh clone."""

from __future__ import annotations

import shutil
from pathlib import Path

from gotham_scaffold.core.config import ScaffoldConfig


def strip_metadata(destination: Path, config: ScaffoldConfig) -> None:
    """Delete the clone's metadata directory and ignore file. Both must exist."""
    shutil.rmtree(destination / config.metadata_dir)
    (destination / config.ignore_file).unlink()
