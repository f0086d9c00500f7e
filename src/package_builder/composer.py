"""Invocation of ``composer init`` for a freshly built package."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Protocol, Sequence

from loguru import logger

from .config import ComposerConfig
from .models import InitializerOutcome

COMMAND_NOT_FOUND = 127
COMMAND_NOT_EXECUTABLE = 126


class CommandRunner(Protocol):
    def run(self, args: Sequence[str]) -> int:
        ...


class SubprocessRunner:
    """Run a command synchronously and return its exit status."""

    def run(self, args: Sequence[str]) -> int:
        try:
            completed = subprocess.run(list(args), check=False)
        except FileNotFoundError:
            logger.warning("Command not found: {}", args[0])
            return COMMAND_NOT_FOUND
        except OSError as exc:
            logger.warning("Command could not be executed: {} ({})", args[0], exc)
            return COMMAND_NOT_EXECUTABLE
        return completed.returncode


def composer_init_command(name: str, target: Path, config: ComposerConfig | None = None) -> List[str]:
    config = config or ComposerConfig()
    return [
        config.binary,
        "init",
        "--name",
        name,
        "--working-dir",
        str(target),
        *config.extra_args,
    ]


def init_composer(
    name: str,
    target: Path,
    *,
    config: ComposerConfig | None = None,
    runner: CommandRunner | None = None,
) -> InitializerOutcome:
    """Run ``composer init`` against ``target``.

    A failing command is reported through the returned outcome; nothing
    already written is touched.
    """

    command = composer_init_command(name, target, config)
    runner = runner or SubprocessRunner()
    logger.info("Running {}", " ".join(command))
    returncode = runner.run(command)
    outcome = InitializerOutcome(command=command, returncode=returncode)
    if not outcome.succeeded:
        logger.warning("composer init exited with status {}", returncode)
    return outcome


__all__ = ["CommandRunner", "SubprocessRunner", "composer_init_command", "init_composer"]
