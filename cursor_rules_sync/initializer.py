"""Sets up the two-file `.cursor/rules` layout inside a project."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from cursor_rules_sync.config import SyncConfig
from cursor_rules_sync.confirm import Confirmer
from cursor_rules_sync.constants import PROJECT_RULES_DIR, PROJECT_RULES_FILENAME
from cursor_rules_sync.errors import (
    DeployError,
    InitError,
    SourceDocumentMissingError,
    TargetDirectoryMissingError,
)
from cursor_rules_sync.executor import ArtifactExecutor
from cursor_rules_sync.models import ActionResult, ActionStatus, DeployMode, InitReport
from cursor_rules_sync.planning import plan_artifact, plan_write_text
from cursor_rules_sync.repository import RulesRepository
from cursor_rules_sync.templates import render_project_rules


logger = logging.getLogger(__name__)


class ProjectInitializer:
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

    def rules_dir(self, target_dir: Path) -> Path:
        return target_dir / PROJECT_RULES_DIR

    def init_project(self, target_dir: Path) -> InitReport:
        source = self.repository.ensure_current()
        rules_dir = self.rules_dir(target_dir)
        report = InitReport(rules_dir=rules_dir)
        try:
            if not target_dir.is_dir():
                raise TargetDirectoryMissingError(target_dir)
            rules_dir.mkdir(parents=True, exist_ok=True)
            report.project_rules = self._init_project_rules(
                rules_dir / PROJECT_RULES_FILENAME, _project_name(target_dir), report
            )
            report.global_rules = self._init_global_rules(
                rules_dir / self.config.rules_filename, source, report
            )
        except DeployError as exc:
            raise InitError(str(exc)) from exc
        except OSError as exc:
            raise InitError(f"Cannot prepare {rules_dir}: {exc}") from exc
        return report

    def _init_project_rules(
        self, path: Path, project_name: str, report: InitReport
    ) -> Optional[ActionResult]:
        action = plan_write_text(path, render_project_rules(project_name))
        if action.status == ActionStatus.REPLACE and not self.confirmer.confirm(
            f"Project-specific rules already exist at {path}. Replace them?"
        ):
            report.skipped.append(f"Project rules left unchanged: {path}")
            return None
        return self.executor.execute(action)

    def _init_global_rules(
        self, path: Path, source: Path, report: InitReport
    ) -> Optional[ActionResult]:
        if not source.is_file():
            raise SourceDocumentMissingError(source)

        if path.is_symlink():
            action = plan_artifact(path, source, DeployMode.SYMLINK)
            prompt = f"Global rules at {path} link elsewhere. Re-link them?"
        elif path.exists():
            action = plan_artifact(path, source, DeployMode.COPY)
            prompt = f"Global rules already exist at {path}. Update them?"
        else:
            mode = DeployMode.COPY
            if self.confirmer.confirm(
                "Symlink global rules (recommended for auto-updates)?"
            ):
                mode = DeployMode.SYMLINK
            return self.executor.execute(plan_artifact(path, source, mode))

        if action.status.needs_confirmation and not self.confirmer.confirm(prompt):
            report.skipped.append(f"Global rules left unchanged: {path}")
            return None
        return self.executor.execute(action)


def _project_name(target_dir: Path) -> str:
    return target_dir.resolve().name
