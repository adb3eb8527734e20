"""Rewriting of the template's module path in generated sources."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from gotham_scaffold.core.config import ScaffoldConfig


def replace_placeholder(text: str, placeholder: str, replacement: str) -> tuple[str, int]:
    """Replace every literal *placeholder* in *text*. Returns the text and the hit count."""
    count = text.count(placeholder)
    if count == 0:
        return text, 0
    return text.replace(placeholder, replacement), count


def iter_source_files(root: Path, suffixes: tuple[str, ...]) -> Iterator[Path]:
    """
    Yield regular files under *root* whose names end in one of *suffixes*.

    Traversal is depth-first over an explicit stack, so tree depth is not
    bounded by the interpreter's recursion limit. Symlinked directories are
    not entered.
    """
    pending = [root]
    while pending:
        directory = pending.pop()
        for entry in directory.iterdir():
            if entry.is_dir():
                if not entry.is_symlink():
                    pending.append(entry)
            elif entry.is_file() and entry.name.endswith(suffixes):
                yield entry


def rewrite_imports(root: Path, replacement: str, config: ScaffoldConfig) -> list[Path]:
    """
    Replace the template placeholder with *replacement* in every source file
    under *root*. Returns the files whose contents changed.
    """
    rewritten: list[Path] = []
    for path in iter_source_files(root, config.source_suffixes):
        content = path.read_bytes().decode("utf-8")
        new_content, count = replace_placeholder(content, config.placeholder, replacement)
        if count:
            path.write_bytes(new_content.encode("utf-8"))
            rewritten.append(path)
    return rewritten
