import filecmp
import json
import os
import shutil
from datetime import datetime
from pathlib import Path
from typing import Any

from cursor_rules_sync.constants import BACKUP_SUFFIX


def now_stamp() -> str:
    return datetime.now().strftime("%Y%m%d-%H%M%S")


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def read_json_safe(path: Path) -> tuple[Any | None, str | None]:
    if not path.exists():
        return None, None
    if path.stat().st_size == 0:
        return None, None
    try:
        return read_json(path), None
    except (OSError, ValueError) as exc:
        return None, str(exc)


def backup_path_for(path: Path) -> Path:
    candidate = Path(f"{path}{BACKUP_SUFFIX}")
    if not candidate.exists() and not candidate.is_symlink():
        return candidate
    return Path(f"{path}{BACKUP_SUFFIX}-{now_stamp()}")


def backup_file(path: Path) -> Path:
    backup_path = backup_path_for(path)
    shutil.copy2(path, backup_path)
    return backup_path


def is_link_to(path: Path, source: Path) -> bool:
    if not path.is_symlink():
        return False
    return os.path.realpath(path) == os.path.realpath(source)


def same_content(path: Path, source: Path) -> bool:
    if path.is_symlink() or not path.is_file():
        return False
    return filecmp.cmp(path, source, shallow=False)


def dir_is_empty(path: Path) -> bool:
    return not any(path.iterdir())


def compact_home_path(path: str | Path) -> str:
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    home_prefix = f"{home}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text


def compact_home_paths_in_text(text: str) -> str:
    home = str(Path.home())
    if text == home:
        return "~"
    return text.replace(f"{home}/", "~/")
