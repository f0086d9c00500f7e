"""Bundled stub files and the text substitutions applied to them."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

STUBS_DIRECTORY = Path(__file__).resolve().parent / "stubs"

README_STUB = "readme"
README_TOKEN = "TITLE"
STYLE_CHECKER_STUB = "php_cs"
STYLE_CHECKER_TOKEN = "STANDARDS"
STYLE_CHECKER_FILENAME = ".php_cs"
TEST_RUNNER_STUB = "phpunit_config"
TEST_RUNNER_FILENAME = "phpunit.xml.dist"


@dataclass(frozen=True, slots=True)
class StubCopy:
    """A bundled stub and the name it receives inside the package."""

    stub: str
    destination: str


BASE_FILES: tuple[StubCopy, ...] = (
    StubCopy("gitattributes", ".gitattributes"),
    StubCopy("gitignore", ".gitignore"),
    StubCopy("editorconfig", ".editorconfig"),
)

TEST_FILES: tuple[StubCopy, ...] = (StubCopy(TEST_RUNNER_STUB, TEST_RUNNER_FILENAME),)


def stub_path(stub: str, stubs_directory: Path | None = None) -> Path:
    path = (stubs_directory or STUBS_DIRECTORY) / stub
    if not path.is_file():
        raise FileNotFoundError(f"Stub not found: {path}")
    return path


def read_stub(stub: str, stubs_directory: Path | None = None) -> str:
    return stub_path(stub, stubs_directory).read_text(encoding="utf-8")


def copy_stub(entry: StubCopy, target: Path, stubs_directory: Path | None = None) -> Path:
    """Copy a stub into ``target``, replacing any existing file."""

    destination = target / entry.destination
    shutil.copyfile(stub_path(entry.stub, stubs_directory), destination)
    return destination


def substitute(template: str, token: str, value: str) -> str:
    """Replace every occurrence of ``token``; nothing else in the text changes."""

    return template.replace(token, value)


def php_string(value: str) -> str:
    """Single-quoted PHP literal; only backslash and quote are escaped."""

    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def export_list(values: Iterable[str]) -> str:
    """Serialize strings as a PHP short array, e.g. ``['psr2']``."""

    items: List[str] = [php_string(str(value)) for value in values]
    return "[" + ", ".join(items) + "]"


def render_readme(title: str, stubs_directory: Path | None = None) -> str:
    return substitute(read_stub(README_STUB, stubs_directory), README_TOKEN, title)


def render_style_checker(standard: str, stubs_directory: Path | None = None) -> str:
    template = read_stub(STYLE_CHECKER_STUB, stubs_directory)
    return substitute(template, STYLE_CHECKER_TOKEN, export_list([standard]))


__all__ = [
    "BASE_FILES",
    "StubCopy",
    "STUBS_DIRECTORY",
    "STYLE_CHECKER_FILENAME",
    "TEST_FILES",
    "TEST_RUNNER_FILENAME",
    "copy_stub",
    "export_list",
    "php_string",
    "read_stub",
    "render_readme",
    "render_style_checker",
    "substitute",
]
