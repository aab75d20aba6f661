import shutil
import subprocess
from pathlib import Path

import pytest

from cursor_rules_sync.constants import RULES_FILENAME


GIT_ENV = {
    "GIT_AUTHOR_NAME": "Rules Bot",
    "GIT_AUTHOR_EMAIL": "rules@example.invalid",
    "GIT_COMMITTER_NAME": "Rules Bot",
    "GIT_COMMITTER_EMAIL": "rules@example.invalid",
    "GIT_CONFIG_NOSYSTEM": "1",
}


@pytest.fixture(autouse=True)
def require_git(monkeypatch) -> None:
    if shutil.which("git") is None:
        pytest.skip("git executable not available")
    for key, value in GIT_ENV.items():
        monkeypatch.setenv(key, value)


def run_git(*args: str, cwd: Path) -> str:
    result = subprocess.run(
        ["git", *args], cwd=str(cwd), capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


@pytest.fixture
def git_upstream(tmp_path: Path) -> Path:
    source = tmp_path / "upstream-src"
    source.mkdir()
    run_git("init", "--initial-branch=main", cwd=source)
    (source / RULES_FILENAME).write_text("# v1\n", encoding="utf-8")
    run_git("add", RULES_FILENAME, cwd=source)
    run_git("commit", "-m", "feat: initial rules", cwd=source)
    return source


@pytest.fixture
def git_cmd():
    return run_git
