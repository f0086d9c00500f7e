"""Shared models for build results and step messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional


class MessageLevel(str, Enum):
    """Severity for build messages."""

    WARNING = "warning"
    INFO = "info"


@dataclass(slots=True)
class BuildMessage:
    """Represents a message produced while building a package."""

    level: MessageLevel
    text: str


@dataclass(slots=True)
class WrittenFile:
    """A file created or overwritten inside the target directory."""

    path: Path
    source: Optional[str] = None
    overwritten: bool = False


@dataclass(slots=True)
class InitializerOutcome:
    """Exit status of the external package manifest initializer."""

    command: List[str]
    returncode: int

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


@dataclass(slots=True)
class BuildResult:
    """Outcome of a build run."""

    target: Path
    files: List[WrittenFile] = field(default_factory=list)
    initializer: Optional[InitializerOutcome] = None
    warnings: List[BuildMessage] = field(default_factory=list)
    infos: List[BuildMessage] = field(default_factory=list)

    def extend(self, messages: Iterable[BuildMessage]) -> None:
        for msg in messages:
            if msg.level == MessageLevel.WARNING:
                self.warnings.append(msg)
            elif msg.level == MessageLevel.INFO:
                self.infos.append(msg)

    def relative_paths(self) -> List[str]:
        return [written.path.relative_to(self.target).as_posix() for written in self.files]

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


__all__ = [
    "MessageLevel",
    "BuildMessage",
    "WrittenFile",
    "InitializerOutcome",
    "BuildResult",
]
