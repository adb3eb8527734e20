"""gotham-scaffold: GoTHAM project scaffolding tool."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("gotham-scaffold")
except PackageNotFoundError:
    __version__ = "0.0.0"
