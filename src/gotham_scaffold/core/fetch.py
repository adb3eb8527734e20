"""Template retrieval through the version-control client."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from gotham_scaffold.core.config import ScaffoldConfig
from gotham_scaffold.core.errors import FetchError


@dataclass(frozen=True)
class FetchResult:
    """Outcome of a finished clone process."""

    command: tuple[str, ...]
    returncode: int


def clone_command(destination: Path, config: ScaffoldConfig) -> tuple[str, ...]:
    return (*config.clone_command, config.template_url, str(destination))


def fetch_template(destination: Path, config: ScaffoldConfig) -> FetchResult:
    """
    Clone the template into *destination* and wait for the client to exit.

    The child inherits stdout and stderr so its progress streams straight
    to the terminal. Only a zero exit status counts as success.
    """
    command = clone_command(destination, config)
    try:
        completed = subprocess.run(command, check=False)
    except OSError as exc:
        raise FetchError(f"Could not start '{command[0]}': {exc}") from exc

    if completed.returncode != 0:
        raise FetchError(
            f"Git clone failed with exit code: {completed.returncode}",
            returncode=completed.returncode,
        )
    return FetchResult(command=command, returncode=completed.returncode)
