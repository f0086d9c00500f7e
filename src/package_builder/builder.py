"""High level scaffolding routines."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from loguru import logger
from rich.console import Console

from .composer import CommandRunner, init_composer
from .config import BuilderSettings, PackageConfig, load_settings
from .models import BuildMessage, BuildResult, MessageLevel, WrittenFile
from .prompts import ask_package_config
from .templates import (
    BASE_FILES,
    STYLE_CHECKER_FILENAME,
    TEST_FILES,
    StubCopy,
    copy_stub,
    render_readme,
    render_style_checker,
)

DIRECTORY_MODE = 0o755
GITKEEP = ".gitkeep"


class PackageBuilder:
    """Write a package skeleton for one :class:`PackageConfig` into one target directory."""

    def __init__(
        self,
        config: PackageConfig,
        base_directory: Path | None = None,
        *,
        settings: BuilderSettings | None = None,
        runner: CommandRunner | None = None,
        stubs_directory: Path | None = None,
    ) -> None:
        self.config = config
        self.settings = settings or BuilderSettings()
        self.runner = runner
        self.stubs_directory = stubs_directory
        self.target = config.target_directory(base_directory)
        self.result = BuildResult(target=self.target)

    def build(self) -> BuildResult:
        """Run every step in order; an ``OSError`` stops the remaining steps."""

        logger.info("Building {} in {}", self.config.name, self.target)
        self.create_package()
        if self.config.include_tests:
            self.create_tests()
        if self.config.include_style_checker:
            self.create_style_checker()
        self.run_initializer()
        return self.result

    def create_package(self) -> None:
        self.target.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
        source = self.target / "src"
        source.mkdir(mode=DIRECTORY_MODE, exist_ok=True)
        self._write("README.md", render_readme(self.config.product_title, self.stubs_directory), source="readme")
        self._touch(source / GITKEEP)
        for entry in BASE_FILES:
            self._copy(entry)

    def create_tests(self) -> None:
        tests = self.target / "tests"
        tests.mkdir(mode=DIRECTORY_MODE, exist_ok=True)
        self._touch(tests / GITKEEP)
        for entry in TEST_FILES:
            self._copy(entry)

    def create_style_checker(self) -> None:
        content = render_style_checker(self.config.style_standard, self.stubs_directory)
        self._write(STYLE_CHECKER_FILENAME, content, source="php_cs")

    def run_initializer(self) -> None:
        composer = self.settings.composer
        if not composer.enabled:
            logger.info("Skipping composer init (disabled in settings)")
            self.result.extend([BuildMessage(MessageLevel.INFO, "composer init skipped")])
            return
        outcome = init_composer(self.config.name, self.target, config=composer, runner=self.runner)
        self.result.initializer = outcome
        if not outcome.succeeded:
            self.result.extend(
                [
                    BuildMessage(
                        MessageLevel.WARNING,
                        f"composer init exited with status {outcome.returncode}; "
                        f"composer.json may be missing in {self.target}",
                    )
                ]
            )

    def _existing(self, path: Path) -> bool:
        exists = path.exists()
        if exists:
            logger.warning("Overwriting {}", path)
        return exists

    def _write(self, filename: str, content: str, *, source: Optional[str] = None) -> None:
        path = self.target / filename
        overwritten = self._existing(path)
        path.write_text(content, encoding="utf-8")
        logger.debug("Wrote {}", path)
        self.result.files.append(WrittenFile(path=path, source=source, overwritten=overwritten))

    def _touch(self, path: Path) -> None:
        overwritten = path.exists()
        path.touch()
        self.result.files.append(WrittenFile(path=path, overwritten=overwritten))

    def _copy(self, entry: StubCopy) -> None:
        overwritten = self._existing(self.target / entry.destination)
        path = copy_stub(entry, self.target, self.stubs_directory)
        logger.debug("Copied {} to {}", entry.stub, path)
        self.result.files.append(WrittenFile(path=path, source=entry.stub, overwritten=overwritten))


def build_package(
    config: PackageConfig,
    base_directory: Path | None = None,
    *,
    settings: BuilderSettings | None = None,
    runner: CommandRunner | None = None,
) -> BuildResult:
    """Write the skeleton for ``config`` under ``base_directory``."""

    return PackageBuilder(config, base_directory, settings=settings, runner=runner).build()


def run_build(
    base_directory: Path | None,
    settings_path: Path | None = None,
    *,
    console: Console | None = None,
    runner: CommandRunner | None = None,
) -> BuildResult:
    """Ask the package questions and build the answers."""

    settings = load_settings(settings_path)
    config = ask_package_config(console or Console(), settings.defaults)
    return build_package(config, base_directory, settings=settings, runner=runner)


__all__ = ["PackageBuilder", "build_package", "run_build"]
