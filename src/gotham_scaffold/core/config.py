"""Configuration dataclass for project scaffolding."""

from __future__ import annotations

from dataclasses import dataclass

TEMPLATE_URL = "https://github.com/ManitVig/GoTHAM-starter-app.git"
PLACEHOLDER = "github.com/manitvig/gotham-starter-app"


@dataclass(kw_only=True, frozen=True)
class ScaffoldConfig:
    """
    Fixed parameters of the GoTHAM starter template.

    Attributes:
        template_url: Remote location of the template repository.
        placeholder: Module path baked into the template's sources.
        source_suffixes: File name endings whose contents are rewritten.
        manifest_name: Module manifest written at the project root.
        metadata_dir: Version-control directory removed after cloning.
        ignore_file: Ignore file removed after cloning.
        clone_command: Command prefix; the URL and destination are appended.
    """

    template_url: str = TEMPLATE_URL
    placeholder: str = PLACEHOLDER
    source_suffixes: tuple[str, ...] = (".go", ".templ")
    manifest_name: str = "go.mod"
    metadata_dir: str = ".git"
    ignore_file: str = ".gitignore"
    clone_command: tuple[str, ...] = ("git", "clone")

    def __post_init__(self) -> None:
        if not self.template_url:
            raise ValueError("template_url must not be empty.")
        if not self.placeholder:
            raise ValueError("placeholder must not be empty.")
        if not self.manifest_name:
            raise ValueError("manifest_name must not be empty.")
        if not self.source_suffixes:
            raise ValueError("source_suffixes must contain at least one suffix.")
        for suffix in self.source_suffixes:
            if not suffix.startswith("."):
                raise ValueError(f"source suffix must start with '.', got {suffix!r}.")
        if not self.clone_command:
            raise ValueError("clone_command must not be empty.")
