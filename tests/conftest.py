"""Shared fixtures for the gotham-scaffold test suite."""

from __future__ import annotations

import subprocess
import sys
import textwrap
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from gotham_scaffold.core.config import PLACEHOLDER, ScaffoldConfig

MAIN_GO = f"""\
package main

import (
\t"net/http"

\t"{PLACEHOLDER}/handlers"
\t"{PLACEHOLDER}/views"
)

func main() {{
\thttp.Handle("/", handlers.Home(views.Index()))
}}
"""

BASE_TEMPL = f"""\
package layouts

import "{PLACEHOLDER}/views/components"

templ Base() {{
\t@components.Nav()
\t// see {PLACEHOLDER} for docs
}}
"""

HOME_GO = """\
package handlers

import "net/http"
"""

README = f"# GoTHAM starter\n\ngo get {PLACEHOLDER}\n"


def populate_template(dest: Path) -> None:
    """Lay out a miniature copy of the starter template, as a fresh clone would."""
    dest.mkdir(parents=True)
    (dest / ".git" / "objects").mkdir(parents=True)
    (dest / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    (dest / ".gitignore").write_text("bin/\nnode_modules/\n")
    (dest / "go.mod").write_text(f"module {PLACEHOLDER}\n\ngo 1.22\n")
    (dest / "main.go").write_text(MAIN_GO)
    (dest / "README.md").write_text(README)
    (dest / "handlers").mkdir()
    (dest / "handlers" / "home.go").write_text(HOME_GO)
    (dest / "views" / "layouts").mkdir(parents=True)
    (dest / "views" / "layouts" / "base.templ").write_text(BASE_TEMPL)


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    dest = tmp_path / "cloned"
    populate_template(dest)
    return dest


@pytest.fixture
def fake_clone() -> Callable[..., subprocess.CompletedProcess[str]]:
    """Stand-in for ``subprocess.run`` that materializes the template at the last argument."""

    def run(command: Sequence[str], check: bool = False) -> subprocess.CompletedProcess[str]:
        populate_template(Path(command[-1]))
        return subprocess.CompletedProcess(list(command), 0)

    return run


_CLONE_SCRIPT = textwrap.dedent(
    """
    import pathlib, sys
    url, dest = sys.argv[1], pathlib.Path(sys.argv[2])
    print(f"Cloning into '{dest.name}'...")
    print("remote: Enumerating objects", file=sys.stderr)
    (dest / ".git").mkdir(parents=True)
    (dest / ".gitignore").write_text("bin/\\n")
    (dest / "main.go").write_text("import \\"" + url + "/views\\"\\n")
    """
)


@pytest.fixture
def script_config() -> ScaffoldConfig:
    """Config whose clone command is a Python script that writes a tiny tree."""
    return ScaffoldConfig(
        template_url="github.com/manitvig/gotham-starter-app",
        clone_command=(sys.executable, "-c", _CLONE_SCRIPT),
    )


@pytest.fixture
def failing_config() -> ScaffoldConfig:
    return ScaffoldConfig(clone_command=(sys.executable, "-c", "import sys; sys.exit(128)"))
