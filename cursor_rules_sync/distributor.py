"""Propagates the canonical rules file into target projects."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from cursor_rules_sync.config import SyncConfig
from cursor_rules_sync.confirm import Confirmer
from cursor_rules_sync.constants import PROJECT_RULES_DIR
from cursor_rules_sync.errors import (
    DeployCancelledError,
    RulesSyncError,
    SourceDocumentMissingError,
    TargetDirectoryMissingError,
)
from cursor_rules_sync.executor import ArtifactExecutor
from cursor_rules_sync.models import (
    Action,
    ActionKind,
    ActionResult,
    BatchResult,
    DeployMode,
)
from cursor_rules_sync.planning import plan_artifact
from cursor_rules_sync.repository import RulesRepository


logger = logging.getLogger(__name__)


def confirmation_prompt(action: Action) -> str:
    if action.path.is_symlink():
        return f"Symlink already exists at {action.path}. Replace it?"
    if action.kind == ActionKind.SYMLINK:
        return f"Rules file already exists at {action.path}. Replace it with a symlink?"
    return f"Rules file already exists at {action.path}. Replace it?"


class Distributor:
    def __init__(
        self,
        config: SyncConfig,
        repository: RulesRepository,
        confirmer: Confirmer,
        executor: Optional[ArtifactExecutor] = None,
    ) -> None:
        self.config = config
        self.repository = repository
        self.confirmer = confirmer
        self.executor = executor or ArtifactExecutor()

    def target_path(self, target_dir: Path) -> Path:
        return target_dir / self.config.target_filename

    def deploy(self, target_dir: Path, mode: DeployMode, sync: bool = True) -> ActionResult:
        if sync:
            self.repository.ensure_current()
        return self._deploy_one(target_dir, mode)

    def deploy_batch(self, target_dirs: Iterable[Path], mode: DeployMode) -> BatchResult:
        """Sync once, then deploy into each directory independently.

        Failures are counted rather than raised so one bad path does not stop
        the remaining ones.
        """
        self.repository.ensure_current()
        result = BatchResult()
        for target_dir in target_dirs:
            try:
                self._deploy_one(target_dir, mode)
            except RulesSyncError as exc:
                logger.debug("deploy to %s failed: %s", target_dir, exc)
                result.record_failure(str(exc))
            else:
                result.record_success()
        return result

    def refresh(self, target_dir: Path) -> list[ActionResult]:
        """Re-deploy without changing what kind of artifact the project uses."""
        self.repository.ensure_current()
        target = self.target_path(target_dir)
        mode = DeployMode.SYMLINK if target.is_symlink() else DeployMode.COPY
        results = [self._deploy_one(target_dir, mode)]

        nested = target_dir / PROJECT_RULES_DIR / self.config.rules_filename
        if nested.is_file() and not nested.is_symlink():
            results.append(self.materialize(nested, DeployMode.COPY))
        return results

    def materialize(self, target: Path, mode: DeployMode) -> ActionResult:
        source = self.repository.rules_path
        if not source.is_file():
            raise SourceDocumentMissingError(source)

        action = plan_artifact(target, source, mode)
        if action.status.needs_confirmation and not self.confirmer.confirm(
            confirmation_prompt(action)
        ):
            raise DeployCancelledError(target)
        return self.executor.execute(action)

    def _deploy_one(self, target_dir: Path, mode: DeployMode) -> ActionResult:
        if not target_dir.is_dir():
            raise TargetDirectoryMissingError(target_dir)
        return self.materialize(self.target_path(target_dir), mode)
