import shutil
from pathlib import Path
from typing import Optional, Protocol

from cursor_rules_sync.errors import ArtifactWriteError
from cursor_rules_sync.models import Action, ActionKind, ActionResult, ActionStatus
from cursor_rules_sync.utils import backup_file


def _clear_existing(path: Path) -> Optional[Path]:
    """Back up a regular file, drop a link. Returns the backup path if one was made."""
    if path.is_symlink():
        path.unlink()
        return None
    if path.exists():
        backup = backup_file(path)
        path.unlink()
        return backup
    return None


class ActionHandler(Protocol):
    def handle(self, action: Action) -> Optional[Path]: ...


class CopyHandler:
    def handle(self, action: Action) -> Optional[Path]:
        if action.source is None:
            raise ArtifactWriteError(action.path, "missing source for copy")
        backup = _clear_existing(action.path)
        action.path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(action.source, action.path)
        return backup


class SymlinkHandler:
    def handle(self, action: Action) -> Optional[Path]:
        if action.source is None:
            raise ArtifactWriteError(action.path, "missing source for symlink")
        backup = _clear_existing(action.path)
        action.path.parent.mkdir(parents=True, exist_ok=True)
        action.path.symlink_to(action.source.resolve())
        return backup


class WriteTextHandler:
    def handle(self, action: Action) -> Optional[Path]:
        if not isinstance(action.payload, str):
            raise ArtifactWriteError(action.path, "missing text payload")
        backup = _clear_existing(action.path)
        action.path.parent.mkdir(parents=True, exist_ok=True)
        action.path.write_text(action.payload, encoding="utf-8")
        return backup


class ArtifactExecutor:
    def __init__(self) -> None:
        self.handlers: dict[ActionKind, ActionHandler] = {
            ActionKind.COPY: CopyHandler(),
            ActionKind.SYMLINK: SymlinkHandler(),
            ActionKind.WRITE_TEXT: WriteTextHandler(),
        }

    def execute(self, action: Action) -> ActionResult:
        if action.status == ActionStatus.NOOP:
            return ActionResult(action=action, changed=False)

        handler = self.handlers.get(action.kind)
        if handler is None:
            raise ArtifactWriteError(action.path, f"unknown action kind {action.kind.value}")

        try:
            backup = handler.handle(action)
        except OSError as exc:
            raise ArtifactWriteError(action.path, exc.strerror or str(exc)) from exc
        return ActionResult(action=action, changed=True, backup=backup)
