import json
from pathlib import Path

from cursor_rules_sync.utils import (
    backup_file,
    compact_home_path,
    compact_home_paths_in_text,
    is_link_to,
    read_json_safe,
    same_content,
)


def test_read_json_safe_file_missing(tmp_path: Path) -> None:
    assert read_json_safe(tmp_path / "missing.json") == (None, None)


def test_read_json_safe_file_empty(tmp_path: Path) -> None:
    path = tmp_path / "empty.json"
    path.write_text("", encoding="utf-8")

    assert read_json_safe(path) == (None, None)


def test_read_json_safe_valid_json(tmp_path: Path) -> None:
    path = tmp_path / "valid.json"
    path.write_text(json.dumps({"key": "value"}), encoding="utf-8")

    assert read_json_safe(path) == ({"key": "value"}, None)


def test_read_json_safe_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "invalid.json"
    path.write_text("{bad json", encoding="utf-8")

    result, error = read_json_safe(path)

    assert result is None
    assert isinstance(error, str)


def test_backup_file_uses_backup_suffix(tmp_path: Path) -> None:
    original = tmp_path / ".cursorrules"
    original.write_text("rules", encoding="utf-8")

    backup_path = backup_file(original)

    assert backup_path == tmp_path / ".cursorrules.backup"
    assert backup_path.read_text(encoding="utf-8") == "rules"
    assert original.exists()


def test_backup_file_keeps_previous_backup(tmp_path: Path) -> None:
    original = tmp_path / ".cursorrules"
    original.write_text("new", encoding="utf-8")
    (tmp_path / ".cursorrules.backup").write_text("old", encoding="utf-8")

    backup_path = backup_file(original)

    assert backup_path.name.startswith(".cursorrules.backup-")
    assert (tmp_path / ".cursorrules.backup").read_text(encoding="utf-8") == "old"


def test_is_link_to_follows_relative_links(tmp_path: Path) -> None:
    source = tmp_path / "rules.mdc"
    source.write_text("x", encoding="utf-8")
    link = tmp_path / "link"
    link.symlink_to("rules.mdc")

    assert is_link_to(link, source) is True
    assert is_link_to(source, source) is False


def test_same_content_ignores_links(tmp_path: Path) -> None:
    source = tmp_path / "rules.mdc"
    source.write_text("x", encoding="utf-8")
    copy = tmp_path / "copy.mdc"
    copy.write_text("x", encoding="utf-8")
    link = tmp_path / "link"
    link.symlink_to(source)

    assert same_content(copy, source) is True
    assert same_content(link, source) is False


def test_compact_home_path_for_absolute_home_path(tmp_path: Path) -> None:
    assert compact_home_path(tmp_path / ".cursor-global-config") == "~/.cursor-global-config"


def test_compact_home_paths_in_text_rewrites_embedded_paths(tmp_path: Path) -> None:
    message = f"Rules file not found: {tmp_path / '.cursor-global-config' / 'global-rules.mdc'}"

    assert compact_home_paths_in_text(message) == (
        "Rules file not found: ~/.cursor-global-config/global-rules.mdc"
    )
