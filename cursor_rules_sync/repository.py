"""Keeps the local copy of the shared rules repository current."""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path

from cursor_rules_sync.config import SyncConfig
from cursor_rules_sync.errors import RulesDocumentMissingError
from cursor_rules_sync.git_client import GitCliClient, ISourceControlClient
from cursor_rules_sync.models import RepositoryState
from cursor_rules_sync.utils import dir_is_empty


logger = logging.getLogger(__name__)


class RulesRepository:
    def __init__(
        self,
        config: SyncConfig,
        client: ISourceControlClient | None = None,
    ) -> None:
        self.config = config
        self.client = client or GitCliClient()

    @property
    def root(self) -> Path:
        return self.config.cache_dir

    @property
    def rules_path(self) -> Path:
        return self.config.rules_path

    def state(self) -> RepositoryState:
        if not self.root.is_dir():
            return RepositoryState.ABSENT
        if self.client.is_repository(self.root):
            return RepositoryState.GIT
        if dir_is_empty(self.root):
            return RepositoryState.EMPTY
        return RepositoryState.NON_GIT

    def ensure_current(self) -> Path:
        """Clone or pull the rules repository and return the canonical rules path.

        A populated directory without git metadata is left alone apart from the
        rules file, which is taken from a throwaway clone.
        """
        state = self.state()
        logger.debug("rules repository %s is %s", self.root, state.value)

        if state == RepositoryState.GIT:
            self.client.pull(self.root, self.config.remote, self.config.branch)
        elif state == RepositoryState.NON_GIT:
            self._copy_rules_from_temporary_clone()
        else:
            self.root.mkdir(parents=True, exist_ok=True)
            self.client.clone(self.config.repo_url, self.root, self.config.branch)

        if not self.rules_path.is_file():
            raise RulesDocumentMissingError(self.rules_path)
        return self.rules_path

    def _copy_rules_from_temporary_clone(self) -> None:
        with tempfile.TemporaryDirectory(prefix="cursor-rules-") as temp_dir:
            clone_dir = Path(temp_dir) / "clone"
            self.client.clone(self.config.repo_url, clone_dir, self.config.branch)
            cloned_rules = clone_dir / self.config.rules_filename
            if not cloned_rules.is_file():
                raise RulesDocumentMissingError(cloned_rules)
            shutil.copy2(cloned_rules, self.rules_path)
