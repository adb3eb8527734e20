"""Go module manifest creation."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from gotham_scaffold.core.config import ScaffoldConfig

_err_console = Console(stderr=True)


def manifest_text(identifier: str) -> str:
    return f"module {identifier}"


def write_manifest(destination: Path, identifier: str, config: ScaffoldConfig) -> Path:
    """Write the manifest naming *identifier*, replacing any previous one."""
    path = destination / config.manifest_name
    path.write_text(manifest_text(identifier), encoding="utf-8")
    return path


def initialize_manifest(
    destination: Path, identifier: str, config: ScaffoldConfig
) -> Path | None:
    """
    Like :func:`write_manifest`, but a write failure is reported on stderr
    and ``None`` is returned instead of raising.
    """
    try:
        return write_manifest(destination, identifier, config)
    except (OSError, UnicodeError) as exc:
        _err_console.print(
            f"[bold red]Error creating {escape(config.manifest_name)}:[/] {escape(str(exc))}"
        )
        return None
