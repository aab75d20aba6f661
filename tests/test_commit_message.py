from pathlib import Path

import pytest

from cursor_rules_sync.commit_message import (
    COMMIT_TYPES,
    check_commit_message_file,
    commit_header,
    validate_commit_message,
)


@pytest.mark.parametrize(
    "message",
    [
        "feat(auth): add login",
        "fix: correct response code",
        "chore(deps-2024): bump click",
        "docs(readme): explain hooks\n\nLonger body text that can be any length at all.",
        "refactor: " + "x" * 100,
    ],
)
def test_accepts_conventional_messages(message: str) -> None:
    assert validate_commit_message(message).ok


@pytest.mark.parametrize(
    "message",
    [
        "Added login function",
        "feature(auth): add login",
        "feat(Auth): add login",
        "feat(auth) add login",
        "feat: ",
        "",
    ],
)
def test_rejects_malformed_messages(message: str) -> None:
    check = validate_commit_message(message)

    assert not check.ok
    assert check.reason


def test_rejects_long_description() -> None:
    check = validate_commit_message("feat: " + "a" * 150)

    assert not check.ok
    assert "150 characters" in check.reason


@pytest.mark.parametrize(
    "message",
    [
        "Merge branch 'main' into feature",
        "Merge branch 'x'\n\nwhatever else",
        "Merge pull request #12 from org/branch",
    ],
)
def test_merge_commits_are_exempt(message: str) -> None:
    assert validate_commit_message(message).ok


def test_every_type_is_accepted() -> None:
    for commit_type in COMMIT_TYPES:
        assert validate_commit_message(f"{commit_type}: do it").ok


def test_header_skips_comments_and_blank_lines() -> None:
    message = "# Please enter the commit message\n\nfix: trailing   \n# more"

    assert commit_header(message) == "fix: trailing"
    assert validate_commit_message(message).ok


def test_missing_message_file_passes(tmp_path: Path) -> None:
    check = check_commit_message_file(tmp_path / ".git" / "COMMIT_EDITMSG")

    assert check.ok


def test_message_file_is_validated(tmp_path: Path) -> None:
    path = tmp_path / "COMMIT_EDITMSG"
    path.write_text("Added login function\n", encoding="utf-8")

    assert not check_commit_message_file(path).ok
