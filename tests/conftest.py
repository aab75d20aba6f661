import shutil
import sys
from pathlib import Path
from typing import Any, Callable, Optional

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()

from cursor_rules_sync.config import SyncConfig  # noqa: E402
from cursor_rules_sync.constants import (  # noqa: E402
    ENV_BRANCH,
    ENV_CACHE_DIR,
    ENV_REPO_URL,
    GIT_DIRNAME,
    RULES_FILENAME,
)
from cursor_rules_sync.git_client import ISourceControlClient  # noqa: E402
from cursor_rules_sync.repository import RulesRepository  # noqa: E402


RULES_TEXT = "# Global rules\n\nBe consistent.\n"


class FakeGitClient(ISourceControlClient):
    """Clones and pulls by copying a local upstream directory."""

    def __init__(self, upstream: Path) -> None:
        self.upstream = upstream
        self.calls: list[tuple[Any, ...]] = []

    def clone(self, url: str, dest: Path, branch: Optional[str] = None) -> None:
        self.calls.append(("clone", url, dest, branch))
        shutil.copytree(self.upstream, dest, dirs_exist_ok=True)
        (dest / GIT_DIRNAME).mkdir(exist_ok=True)

    def pull(self, path: Path, remote: str, branch: str) -> None:
        self.calls.append(("pull", path, remote, branch))
        shutil.copytree(self.upstream, path, dirs_exist_ok=True)

    def is_repository(self, path: Path) -> bool:
        return (path / GIT_DIRNAME).exists()

    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]


class ScriptedConfirmer:
    def __init__(self, *answers: bool) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []

    def confirm(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"unexpected prompt: {prompt}")
        return self.answers.pop(0)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / ".config"))
    for name in (ENV_REPO_URL, ENV_CACHE_DIR, ENV_BRANCH):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def upstream(tmp_path: Path) -> Path:
    root = tmp_path / "upstream"
    root.mkdir()
    (root / RULES_FILENAME).write_text(RULES_TEXT, encoding="utf-8")
    (root / "README.md").write_text("shared rules\n", encoding="utf-8")
    return root


@pytest.fixture
def git_client(upstream: Path) -> FakeGitClient:
    return FakeGitClient(upstream)


@pytest.fixture
def config(tmp_path: Path) -> SyncConfig:
    return SyncConfig(
        repo_url="https://example.invalid/cursor-global-config.git",
        cache_dir=tmp_path / ".cursor-global-config",
    )


@pytest.fixture
def repository(config: SyncConfig, git_client: FakeGitClient) -> RulesRepository:
    return RulesRepository(config, client=git_client)


@pytest.fixture
def synced_repository(repository: RulesRepository) -> RulesRepository:
    repository.ensure_current()
    return repository


@pytest.fixture
def project(tmp_path: Path) -> Path:
    path = tmp_path / "my-app"
    path.mkdir()
    return path


@pytest.fixture
def confirm_with() -> Callable[..., ScriptedConfirmer]:
    return ScriptedConfirmer


@pytest.fixture
def cli_runner(tmp_path: Path) -> CliRunner:
    class HomeCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("HOME", str(tmp_path))
            env.setdefault("XDG_CONFIG_HOME", str(tmp_path / ".config"))
            env.setdefault("COLUMNS", "240")
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return HomeCliRunner()


@pytest.fixture
def app_context(config: SyncConfig, git_client: FakeGitClient):
    from rich.console import Console

    from cursor_rules_sync.__main__ import AppContext
    from cursor_rules_sync.confirm import AssumeYesConfirmer
    from cursor_rules_sync.tui import RulesConsoleUI

    def _build(confirmer=None) -> AppContext:
        return AppContext(
            config=config,
            confirmer=confirmer or AssumeYesConfirmer(),
            client=git_client,
            ui=RulesConsoleUI(Console(width=240)),
        )

    return _build


@pytest.fixture
def rules_text() -> str:
    return RULES_TEXT
