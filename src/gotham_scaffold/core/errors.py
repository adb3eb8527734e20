"""Exceptions raised while scaffolding a project."""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for scaffolding failures."""


class ScaffoldCancelled(ScaffoldError):
    """Raised when the caller declines to overwrite an existing destination."""


class FetchError(ScaffoldError):
    """Raised when the template clone does not succeed."""

    def __init__(self, message: str, returncode: int | None = None):
        self.returncode = returncode
        super().__init__(message)
