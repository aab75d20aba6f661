from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class RepositoryState(str, Enum):
    ABSENT = "absent"
    EMPTY = "empty"
    NON_GIT = "non_git"
    GIT = "git"


class DeployMode(str, Enum):
    COPY = "copy"
    SYMLINK = "symlink"


class ActionKind(str, Enum):
    COPY = "copy"
    SYMLINK = "symlink"
    WRITE_TEXT = "write_text"


class ActionStatus(str, Enum):
    NOOP = "noop"
    CREATE = "create"
    REPLACE = "replace"
    FIX = "fix"

    @property
    def needs_confirmation(self) -> bool:
        return self in (ActionStatus.REPLACE, ActionStatus.FIX)


@dataclass
class Action:
    kind: ActionKind
    path: Path
    status: ActionStatus
    detail: str
    source: Optional[Path] = None
    payload: Optional[str] = None


@dataclass
class ActionResult:
    action: Action
    changed: bool
    backup: Optional[Path] = None


@dataclass
class BatchResult:
    success_count: int = 0
    fail_count: int = 0
    failures: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.success_count + self.fail_count

    @property
    def ok(self) -> bool:
        return self.fail_count == 0

    def record_success(self) -> None:
        self.success_count += 1

    def record_failure(self, message: str) -> None:
        self.fail_count += 1
        self.failures.append(message)


@dataclass(frozen=True)
class CommitCheck:
    ok: bool
    reason: str = ""


@dataclass
class InitReport:
    rules_dir: Path
    project_rules: Optional[ActionResult] = None
    global_rules: Optional[ActionResult] = None
    skipped: list[str] = field(default_factory=list)
