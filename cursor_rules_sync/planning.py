import logging
from pathlib import Path

from cursor_rules_sync.models import Action, ActionKind, ActionStatus, DeployMode
from cursor_rules_sync.utils import is_link_to, same_content


logger = logging.getLogger(__name__)


def plan_artifact(target: Path, source: Path, mode: DeployMode) -> Action:
    if mode == DeployMode.SYMLINK:
        action = plan_symlink(target, source)
    else:
        action = plan_copy(target, source)
    logger.debug("%s %s: %s", action.kind.value, target, action.detail)
    return action


def plan_symlink(target: Path, source: Path) -> Action:
    if target.is_symlink():
        if is_link_to(target, source):
            return Action(
                ActionKind.SYMLINK, target, ActionStatus.NOOP, "already linked", source=source
            )
        return Action(
            ActionKind.SYMLINK,
            target,
            ActionStatus.FIX,
            "symlink points elsewhere",
            source=source,
        )
    if target.exists():
        return Action(
            ActionKind.SYMLINK,
            target,
            ActionStatus.REPLACE,
            "rules file exists",
            source=source,
        )
    return Action(
        ActionKind.SYMLINK, target, ActionStatus.CREATE, "create symlink", source=source
    )


def plan_copy(target: Path, source: Path) -> Action:
    if target.is_symlink():
        return Action(
            ActionKind.COPY,
            target,
            ActionStatus.REPLACE,
            "symlink exists",
            source=source,
        )
    if target.exists():
        if same_content(target, source):
            return Action(
                ActionKind.COPY, target, ActionStatus.NOOP, "already up to date", source=source
            )
        return Action(
            ActionKind.COPY,
            target,
            ActionStatus.REPLACE,
            "rules file exists",
            source=source,
        )
    return Action(ActionKind.COPY, target, ActionStatus.CREATE, "create copy", source=source)


def plan_write_text(target: Path, payload: str) -> Action:
    if target.is_symlink() or target.exists():
        return Action(
            ActionKind.WRITE_TEXT,
            target,
            ActionStatus.REPLACE,
            "file exists",
            payload=payload,
        )
    return Action(
        ActionKind.WRITE_TEXT, target, ActionStatus.CREATE, "create file", payload=payload
    )
