"""Destination directory resolution."""

from __future__ import annotations

import shutil
from collections.abc import Callable
from pathlib import Path

from gotham_scaffold.core.errors import ScaffoldCancelled


def resolve_destination(path: Path, confirm: Callable[[Path], bool]) -> Path:
    """
    Prepare *path* to receive a fresh template.

    If *path* already exists, *confirm* is asked whether it may be replaced.
    A refusal raises :class:`ScaffoldCancelled` before anything is touched;
    an acceptance deletes the existing entry recursively.
    """
    if not (path.exists() or path.is_symlink()):
        return path

    if not confirm(path):
        raise ScaffoldCancelled(f"Directory '{path}' was left untouched.")

    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()
    return path
