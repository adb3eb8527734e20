"""Typer CLI application for gotham-scaffold."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.markup import escape
from typer import Argument, Exit, Typer

import gotham_scaffold
from gotham_scaffold.cli._prompts import prompt_overwrite
from gotham_scaffold.core import (
    FetchError,
    ScaffoldCancelled,
    ScaffoldConfig,
    fetch_template,
    initialize_manifest,
    resolve_destination,
    rewrite_imports,
    strip_metadata,
)

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()
_err_console = Console(stderr=True)

_JS_INSTALL = "npm install or bun install or yarn install or pnpm install"


def _fail(message: str) -> Exit:
    _err_console.print(f"[bold red]Error:[/] {escape(message)}")
    return Exit(code=1)


@app.command()
def create(
    project_path: Annotated[
        str, Argument(metavar="PROJECT_PATH", help="Directory to create the project in")
    ],
    module_identifier: Annotated[
        str, Argument(metavar="MODULE_IDENTIFIER", help="Go module path, e.g. example.com/app")
    ],
) -> None:
    """Create a new GoTHAM project from the starter template."""
    config = ScaffoldConfig()
    project_dir = Path(project_path)
    shown_path = escape(project_path)
    shown_module = escape(module_identifier)

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  gotham-scaffold v{gotham_scaffold.__version__}")
    _console.print("[dim]│[/]")

    try:
        resolve_destination(project_dir, prompt_overwrite)
    except ScaffoldCancelled:
        _err_console.print("[bold yellow]Project creation cancelled.[/]")
        raise Exit(code=1) from None
    except OSError as exc:
        raise _fail(f"could not remove '{project_path}': {exc}") from None

    _console.print(f"[bold green]◇[/]  Cloning template repository: {escape(config.template_url)}")
    try:
        fetch_template(project_dir, config)
    except FetchError as exc:
        raise _fail(str(exc)) from None
    _console.print("[dim]│[/]")

    try:
        strip_metadata(project_dir, config)
    except OSError as exc:
        raise _fail(f"could not strip template metadata: {exc}") from None

    _console.print(
        f"[bold green]◇[/]  Initializing {config.manifest_name} with identifier: {shown_module}"
    )
    if initialize_manifest(project_dir, module_identifier, config) is not None:
        _console.print(f"[dim]│[/]  {config.manifest_name} created successfully.")
    _console.print("[dim]│[/]")

    _console.print("[bold green]◇[/]  Rewriting imports")
    try:
        rewritten = rewrite_imports(project_dir, module_identifier, config)
    except (OSError, UnicodeDecodeError) as exc:
        raise _fail(f"could not rewrite imports: {exc}") from None

    for path in sorted(rewritten):
        _console.print(f"[dim]│[/]  {escape(path.relative_to(project_dir).as_posix())}")
    _console.print(f"[dim]│[/]  [dim]{len(rewritten)} file(s) updated[/]")
    _console.print("[dim]│[/]")

    _console.print(f"[bold cyan]●[/]  Project '{shown_module}' created successfully!")
    _console.print(f"[dim]│[/]  Navigate to the project directory: cd {shown_path}")
    _console.print("[dim]│[/]  Install go dependencies: templ generate && go mod tidy")
    _console.print(f"[dim]│[/]  Install js dependencies: {_JS_INSTALL}")
    _console.print()
