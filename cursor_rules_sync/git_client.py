"""Source-control access for the shared rules repository."""

from __future__ import annotations

import logging
import os
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from cursor_rules_sync.constants import GIT_DIRNAME
from cursor_rules_sync.errors import GitCommandError, SyncError


logger = logging.getLogger(__name__)

# Exported by git to hooks; they would point clone/pull at the hooked project.
_REPO_LOCAL_ENV = frozenset(
    {
        "GIT_ALTERNATE_OBJECT_DIRECTORIES",
        "GIT_COMMON_DIR",
        "GIT_DIR",
        "GIT_GRAFT_FILE",
        "GIT_IMPLICIT_WORK_TREE",
        "GIT_INDEX_FILE",
        "GIT_INTERNAL_SUPER_PREFIX",
        "GIT_NO_REPLACE_OBJECTS",
        "GIT_OBJECT_DIRECTORY",
        "GIT_PREFIX",
        "GIT_REPLACE_REF_BASE",
        "GIT_SHALLOW_FILE",
        "GIT_WORK_TREE",
    }
)


def _clean_env() -> dict[str, str]:
    return {key: value for key, value in os.environ.items() if key not in _REPO_LOCAL_ENV}


class ISourceControlClient(ABC):
    @abstractmethod
    def clone(self, url: str, dest: Path, branch: Optional[str] = None) -> None:
        raise NotImplementedError

    @abstractmethod
    def pull(self, path: Path, remote: str, branch: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def is_repository(self, path: Path) -> bool:
        raise NotImplementedError


class GitCliClient(ISourceControlClient):
    def __init__(self, executable: str = "git") -> None:
        self.executable = executable

    def clone(self, url: str, dest: Path, branch: Optional[str] = None) -> None:
        args = ["clone"]
        if branch:
            args += ["--branch", branch]
        args += [url, str(dest)]
        self._run(args)

    def pull(self, path: Path, remote: str, branch: str) -> None:
        self._run(["pull", remote, branch], cwd=path)

    def is_repository(self, path: Path) -> bool:
        return (path / GIT_DIRNAME).exists()

    def _run(self, args: list[str], cwd: Optional[Path] = None) -> str:
        argv = [self.executable, *args]
        logger.debug("running %s (cwd=%s)", " ".join(argv), cwd or ".")
        try:
            result = subprocess.run(
                argv,
                cwd=str(cwd) if cwd is not None else None,
                capture_output=True,
                text=True,
                check=False,
                env=_clean_env(),
            )
        except FileNotFoundError as exc:
            raise SyncError(f"git executable not found: {self.executable}") from exc

        if result.stderr.strip():
            logger.debug("git stderr: %s", result.stderr.strip())
        if result.returncode != 0:
            raise GitCommandError(argv, result.returncode, result.stderr)
        return result.stdout.strip()
