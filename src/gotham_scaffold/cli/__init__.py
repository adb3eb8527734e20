"""Command-line interface for gotham-scaffold."""

from gotham_scaffold.cli.app import app

__all__ = ["app"]
