import re
from pathlib import Path
from typing import Final

from cursor_rules_sync.models import CommitCheck


COMMIT_TYPES: Final[tuple[str, ...]] = (
    "feat",
    "fix",
    "docs",
    "style",
    "refactor",
    "perf",
    "test",
    "chore",
    "build",
    "ci",
    "revert",
)
MAX_DESCRIPTION_LENGTH: Final[int] = 100

COMMIT_HEADER_RE = re.compile(
    r"^(?P<type>[a-z]+)(?:\((?P<scope>[a-z0-9-]+)\))?: (?P<description>.+)$"
)
MERGE_RE = re.compile(r"^Merge ")

GUIDANCE: Final[str] = f"""Commit messages must look like: <type>(<scope>): <description>

  type         one of {", ".join(COMMIT_TYPES)}
  scope        optional, lowercase letters, digits and hyphens
  description  1-{MAX_DESCRIPTION_LENGTH} characters

Examples:
  feat(auth): add login
  fix: correct response code

Use `git commit --no-verify` to bypass this check."""


def commit_header(message: str) -> str:
    for line in message.splitlines():
        if line.startswith("#"):
            continue
        stripped = line.rstrip()
        if stripped:
            return stripped
    return ""


def validate_commit_message(message: str) -> CommitCheck:
    header = commit_header(message)
    if MERGE_RE.match(header):
        return CommitCheck(ok=True, reason="merge commit")
    if not header:
        return CommitCheck(ok=False, reason="empty commit message")

    match = COMMIT_HEADER_RE.match(header)
    if match is None:
        return CommitCheck(ok=False, reason=f"missing '<type>(<scope>): ' prefix in {header!r}")
    if match.group("type") not in COMMIT_TYPES:
        return CommitCheck(ok=False, reason=f"unknown commit type {match.group('type')!r}")

    description = match.group("description").strip()
    if not description:
        return CommitCheck(ok=False, reason="empty description")
    if len(description) > MAX_DESCRIPTION_LENGTH:
        return CommitCheck(
            ok=False,
            reason=f"description is {len(description)} characters "
            f"(max {MAX_DESCRIPTION_LENGTH})",
        )
    return CommitCheck(ok=True)


def check_commit_message_file(path: Path) -> CommitCheck:
    if not path.is_file():
        return CommitCheck(ok=True, reason=f"no commit message file at {path}")
    return validate_commit_message(path.read_text(encoding="utf-8", errors="replace"))
