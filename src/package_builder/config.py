"""Package answers and builder settings for Package Builder."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

NAME_PATTERN = re.compile(r"[a-z0-9\-_]+/[a-z0-9\-_]+")
NAMESPACE_SEPARATOR = "\\"
DEFAULT_STYLE_STANDARD = "symfony"


class PackageNameError(ValueError):
    """Raised when a package name is empty or not shaped like vendor/product."""


def validate_package_name(value: Optional[str]) -> str:
    """Return the package name or raise :class:`PackageNameError`."""

    if value is None or value.strip() == "":
        raise PackageNameError("The package name can not be empty")
    if not NAME_PATTERN.fullmatch(value):
        raise PackageNameError("The package name is invalid, format: vendor/product")
    return value


def _capitalize(segment: str) -> str:
    return segment[:1].upper() + segment[1:]


def default_namespace(name: str) -> str:
    """``foo/bar`` becomes ``Foo\\Bar``."""

    return NAMESPACE_SEPARATOR.join(_capitalize(segment) for segment in name.split("/"))


class PackageConfig(BaseModel):
    """Answers collected from the prompt sequence."""

    name: str
    namespace: str = ""
    include_tests: bool = True
    include_style_checker: bool = True
    style_standard: str = DEFAULT_STYLE_STANDARD

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return validate_package_name(value)

    @property
    def product(self) -> str:
        return self.name.split("/")[1]

    @property
    def product_title(self) -> str:
        return _capitalize(self.product)

    def directory_name(self) -> str:
        return self.name.replace("/", "-")

    def target_directory(self, base: Path | None = None) -> Path:
        """Directory the package skeleton is written to."""

        return Path(base if base is not None else ".") / self.directory_name()


class PromptDefaults(BaseModel):
    """Values pre-filled in the confirmation and standard prompts."""

    include_tests: bool = True
    include_style_checker: bool = True
    style_standard: str = DEFAULT_STYLE_STANDARD


class ComposerConfig(BaseModel):
    """How ``composer init`` is invoked after the skeleton is written."""

    enabled: bool = True
    binary: str = "composer"
    extra_args: List[str] = Field(default_factory=list)

    @field_validator("binary")
    @classmethod
    def _require_binary(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Composer binary cannot be empty")
        return value


class BuilderSettings(BaseModel):
    """Top-level builder settings."""

    defaults: PromptDefaults = Field(default_factory=PromptDefaults)
    composer: ComposerConfig = Field(default_factory=ComposerConfig)


class ConfigError(Exception):
    """Raised when a settings file is invalid."""


def load_settings(path: Path | None) -> BuilderSettings:
    """Load builder settings from a YAML file, or the defaults when ``path`` is None."""

    if path is None:
        return BuilderSettings()
    try:
        data = yaml.safe_load(path.read_text())
    except FileNotFoundError as exc:
        raise ConfigError(f"Configuration file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse YAML: {exc}") from exc

    try:
        return BuilderSettings.model_validate(data or {})
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def save_settings(settings: BuilderSettings, path: Path) -> None:
    """Persist builder settings to disk as YAML."""

    rendered = settings.model_dump()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(rendered, sort_keys=False))


__all__ = [
    "BuilderSettings",
    "ComposerConfig",
    "ConfigError",
    "PackageConfig",
    "PackageNameError",
    "PromptDefaults",
    "default_namespace",
    "load_settings",
    "save_settings",
    "validate_package_name",
]
