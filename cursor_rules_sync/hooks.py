"""Installs git hooks that keep deployed rules in sync."""

from __future__ import annotations

import logging
import stat
from pathlib import Path
from typing import Optional

from cursor_rules_sync.constants import GIT_DIRNAME, HOOK_NAMES, HOOKS_DIRNAME
from cursor_rules_sync.errors import HookError, HookWriteError, NotAGitRepositoryError
from cursor_rules_sync.models import BatchResult
from cursor_rules_sync.repository import RulesRepository
from cursor_rules_sync.templates import render_hook
from cursor_rules_sync.workspaces import WorkspaceService


logger = logging.getLogger(__name__)

_EXECUTABLE = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class HookInstaller:
    def __init__(
        self,
        repository: RulesRepository,
        workspace_service: Optional[WorkspaceService] = None,
    ) -> None:
        self.repository = repository
        self.workspace_service = workspace_service or WorkspaceService()

    def hooks_dir(self, project_dir: Path) -> Path:
        return project_dir / GIT_DIRNAME / HOOKS_DIRNAME

    def install_hooks(self, project_dir: Path, sync: bool = True) -> list[Path]:
        if sync:
            self.repository.ensure_current()
        if not self.workspace_service.is_git_repo(project_dir):
            raise NotAGitRepositoryError(project_dir)

        hooks_dir = self.hooks_dir(project_dir)
        written: list[Path] = []
        try:
            hooks_dir.mkdir(parents=True, exist_ok=True)
            for name in HOOK_NAMES:
                written.append(self._write_hook(hooks_dir / name, render_hook(name)))
        except OSError as exc:
            raise HookWriteError(hooks_dir, exc.strerror or str(exc)) from exc
        return written

    def install_hooks_batch(self, base_dir: Path) -> tuple[list[Path], BatchResult]:
        self.repository.ensure_current()
        repos = self.workspace_service.discover_git_repos(base_dir)
        result = BatchResult()
        for repo in repos:
            try:
                self.install_hooks(repo, sync=False)
            except HookError as exc:
                logger.debug("hook install in %s failed: %s", repo, exc)
                result.record_failure(str(exc))
            else:
                result.record_success()
        return repos, result

    @staticmethod
    def _write_hook(path: Path, content: str) -> Path:
        if path.is_symlink():
            path.unlink()
        path.write_text(content, encoding="utf-8")
        path.chmod(path.stat().st_mode | _EXECUTABLE)
        logger.debug("wrote hook %s", path)
        return path
