from pathlib import Path
from typing import Final


APP_NAME: Final[str] = "cursor-rules-sync"

DEFAULT_REPO_URL: Final[str] = "https://github.com/Joshuad2uiuc/cursor-global-config.git"
DEFAULT_CACHE_DIRNAME: Final[str] = ".cursor-global-config"
DEFAULT_BRANCH: Final[str] = "main"
DEFAULT_REMOTE: Final[str] = "origin"

RULES_FILENAME: Final[str] = "global-rules.mdc"
TARGET_FILENAME: Final[str] = ".cursorrules"
PROJECT_RULES_FILENAME: Final[str] = "project-rules.mdc"

CURSOR_DIRNAME: Final[str] = ".cursor"
RULES_DIRNAME: Final[str] = "rules"
PROJECT_RULES_DIR: Final[Path] = Path(CURSOR_DIRNAME) / RULES_DIRNAME

BACKUP_SUFFIX: Final[str] = ".backup"

GIT_DIRNAME: Final[str] = ".git"
HOOKS_DIRNAME: Final[str] = "hooks"
REFRESH_HOOK_NAMES: Final[tuple[str, ...]] = (
    "post-checkout",
    "post-merge",
    "post-rewrite",
    "pre-commit",
)
COMMIT_MSG_HOOK: Final[str] = "commit-msg"
HOOK_NAMES: Final[tuple[str, ...]] = REFRESH_HOOK_NAMES + (COMMIT_MSG_HOOK,)
COMMIT_MSG_FILENAME: Final[str] = "COMMIT_EDITMSG"

WORKSPACE_IGNORED_DIRS: Final[tuple[str, ...]] = (
    "node_modules",
    ".venv",
    "venv",
    "__pycache__",
    "vendor",
)

CONFIG_FILENAME: Final[str] = "config.json"

ENV_REPO_URL: Final[str] = "CURSOR_RULES_REPO_URL"
ENV_CACHE_DIR: Final[str] = "CURSOR_RULES_CACHE_DIR"
ENV_BRANCH: Final[str] = "CURSOR_RULES_BRANCH"
