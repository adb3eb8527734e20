"""Scaffolding steps, in the order they run."""

from gotham_scaffold.core.cleanup import strip_metadata
from gotham_scaffold.core.config import PLACEHOLDER, TEMPLATE_URL, ScaffoldConfig
from gotham_scaffold.core.destination import resolve_destination
from gotham_scaffold.core.errors import FetchError, ScaffoldCancelled, ScaffoldError
from gotham_scaffold.core.fetch import FetchResult, clone_command, fetch_template
from gotham_scaffold.core.manifest import initialize_manifest, manifest_text, write_manifest
from gotham_scaffold.core.rewrite import iter_source_files, replace_placeholder, rewrite_imports

__all__ = [
    "PLACEHOLDER",
    "TEMPLATE_URL",
    "FetchError",
    "FetchResult",
    "ScaffoldCancelled",
    "ScaffoldConfig",
    "ScaffoldError",
    "clone_command",
    "fetch_template",
    "initialize_manifest",
    "iter_source_files",
    "manifest_text",
    "replace_placeholder",
    "resolve_destination",
    "rewrite_imports",
    "strip_metadata",
    "write_manifest",
]
