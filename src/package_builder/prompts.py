"""Interactive question sequence producing a :class:`PackageConfig`."""

from __future__ import annotations

from loguru import logger
from rich.console import Console
from rich.prompt import Confirm, Prompt

from .config import PackageConfig, PackageNameError, PromptDefaults, default_namespace, validate_package_name

MAX_NAME_ATTEMPTS = 5


class PromptAttemptsExceeded(Exception):
    """Raised when no valid package name was entered within the allowed attempts."""

    def __init__(self, attempts: int, last_error: PackageNameError | None = None) -> None:
        message = f"No valid package name after {attempts} attempts"
        if last_error is not None:
            message = f"{message}: {last_error}"
        super().__init__(message)
        self.attempts = attempts
        self.last_error = last_error


def ask_package_name(console: Console, *, max_attempts: int = MAX_NAME_ATTEMPTS) -> str:
    last_error: PackageNameError | None = None
    for attempt in range(1, max_attempts + 1):
        value = Prompt.ask(
            "Please enter the name of the package (example: foo/bar)",
            console=console,
            default="",
            show_default=False,
        )
        try:
            return validate_package_name(value)
        except PackageNameError as exc:
            logger.debug("Rejected package name {!r} (attempt {}/{})", value, attempt, max_attempts)
            console.print(f"[red]{exc}[/red]")
            last_error = exc
    raise PromptAttemptsExceeded(max_attempts, last_error)


def ask_package_config(console: Console, defaults: PromptDefaults | None = None) -> PackageConfig:
    """Ask every question in order and return the collected answers."""

    defaults = defaults or PromptDefaults()
    name = ask_package_name(console)

    namespace = Prompt.ask(
        "Please enter the namespace of the package",
        console=console,
        default=default_namespace(name),
    )
    include_tests = Confirm.ask(
        "Do you want to test this package?",
        console=console,
        default=defaults.include_tests,
    )
    include_style_checker = Confirm.ask(
        "Do you want to use php-cs-fixer to format your code?",
        console=console,
        default=defaults.include_style_checker,
    )
    style_standard = defaults.style_standard
    if include_style_checker:
        style_standard = Prompt.ask(
            "Please enter the standard of php-cs-fixer",
            console=console,
            default=defaults.style_standard,
        )

    return PackageConfig(
        name=name,
        namespace=namespace,
        include_tests=include_tests,
        include_style_checker=include_style_checker,
        style_standard=style_standard,
    )


__all__ = ["MAX_NAME_ATTEMPTS", "PromptAttemptsExceeded", "ask_package_config", "ask_package_name"]
