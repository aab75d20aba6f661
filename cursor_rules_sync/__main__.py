from dataclasses import dataclass
from pathlib import Path
from typing import Callable, NoReturn, Optional

import click
from rich.console import Console

from cursor_rules_sync import __version__
from cursor_rules_sync.commit_message import GUIDANCE, check_commit_message_file
from cursor_rules_sync.config import SyncConfig, load_config
from cursor_rules_sync.confirm import Confirmer, confirmer_for
from cursor_rules_sync.constants import (
    APP_NAME,
    COMMIT_MSG_FILENAME,
    ENV_BRANCH,
    ENV_CACHE_DIR,
    ENV_REPO_URL,
    GIT_DIRNAME,
)
from cursor_rules_sync.distributor import Distributor
from cursor_rules_sync.errors import RulesSyncError, SyncFileError
from cursor_rules_sync.git_client import GitCliClient, ISourceControlClient
from cursor_rules_sync.hooks import HookInstaller
from cursor_rules_sync.initializer import ProjectInitializer
from cursor_rules_sync.logs import configure_logging
from cursor_rules_sync.models import DeployMode
from cursor_rules_sync.repository import RulesRepository
from cursor_rules_sync.tui import RulesConsoleUI


@dataclass
class AppContext:
    config: SyncConfig
    confirmer: Confirmer
    client: ISourceControlClient
    ui: RulesConsoleUI

    def repository(self) -> RulesRepository:
        return RulesRepository(self.config, client=self.client)

    def distributor(self) -> Distributor:
        return Distributor(self.config, self.repository(), self.confirmer)


class RulesGroup(click.Group):
    """Unknown sub-commands print usage instead of failing."""

    def resolve_command(self, ctx: click.Context, args: list[str]):
        if args and self.get_command(ctx, args[0]) is None:
            click.echo(ctx.get_help())
            ctx.exit(0)
        return super().resolve_command(ctx, args)


def _dir_argument(name: str = "directory") -> Callable:
    return click.argument(name, required=False, default=".", type=click.Path(path_type=Path))


def _fail(ui: RulesConsoleUI, exc: Exception) -> NoReturn:
    ui.render_error(str(exc))
    raise click.exceptions.Exit(1)


@click.group(
    cls=RulesGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("-y", "--yes", "assume_yes", is_flag=True, help="Answer yes to every prompt.")
@click.option("-v", "--verbose", is_flag=True, help="Log git commands and decisions.")
@click.option("--repo-url", envvar=ENV_REPO_URL, help="Upstream rules repository URL.")
@click.option(
    "--cache-dir",
    envvar=ENV_CACHE_DIR,
    type=click.Path(path_type=Path),
    help="Local checkout of the rules repository.",
)
@click.option("--branch", envvar=ENV_BRANCH, help="Branch to track.")
@click.version_option(__version__, prog_name=APP_NAME)
@click.pass_context
def cli(
    ctx: click.Context,
    assume_yes: bool,
    verbose: bool,
    repo_url: Optional[str],
    cache_dir: Optional[Path],
    branch: Optional[str],
) -> None:
    """Global Cursor rules management."""
    configure_logging(verbose)
    ui = RulesConsoleUI(Console())
    try:
        config = load_config(repo_url=repo_url, cache_dir=cache_dir, branch=branch)
    except SyncFileError as exc:
        _fail(ui, exc)

    if ctx.obj is None:
        ctx.obj = AppContext(
            config=config,
            confirmer=confirmer_for(assume_yes),
            client=GitCliClient(),
            ui=ui,
        )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command(help="Update rules from the repository.")
@click.pass_obj
def update(obj: AppContext) -> None:
    obj.ui.render_sync_started()
    try:
        rules_path = obj.repository().ensure_current()
    except RulesSyncError as exc:
        _fail(obj.ui, exc)
    obj.ui.render_sync_result(rules_path)


@cli.command(help="Initialize a project with global and project-specific rules.")
@_dir_argument()
@click.pass_obj
def init(obj: AppContext, directory: Path) -> None:
    initializer = ProjectInitializer(obj.config, obj.repository(), obj.confirmer)
    obj.ui.render_sync_started()
    try:
        report = initializer.init_project(directory)
    except RulesSyncError as exc:
        _fail(obj.ui, exc)
    obj.ui.render_init_result(report, directory, obj.config.rules_filename)


@cli.command(help="Copy rules into the given directories (default: current directory).")
@click.argument("directories", nargs=-1, type=click.Path(path_type=Path))
@click.pass_obj
def apply(obj: AppContext, directories: tuple[Path, ...]) -> None:
    targets = list(directories) or [Path(".")]
    obj.ui.render_sync_started()
    try:
        result = obj.distributor().deploy_batch(targets, DeployMode.COPY)
    except RulesSyncError as exc:
        _fail(obj.ui, exc)
    obj.ui.render_batch_result("apply", result)
    if not result.ok:
        raise click.exceptions.Exit(1)


@cli.command(help="Symlink rules into a directory instead of copying.")
@_dir_argument()
@click.pass_obj
def link(obj: AppContext, directory: Path) -> None:
    obj.ui.render_sync_started()
    try:
        result = obj.distributor().deploy(directory, DeployMode.SYMLINK)
    except RulesSyncError as exc:
        _fail(obj.ui, exc)
    obj.ui.render_deploy_result(result, directory)


@cli.command(help="Re-deploy rules, keeping copies as copies and links as links.")
@_dir_argument()
@click.pass_obj
def refresh(obj: AppContext, directory: Path) -> None:
    try:
        results = obj.distributor().refresh(directory)
    except RulesSyncError as exc:
        _fail(obj.ui, exc)
    obj.ui.render_results("refresh", results)


@cli.command(help="Install git hooks that re-apply rules automatically.")
@_dir_argument()
@click.pass_obj
def hooks(obj: AppContext, directory: Path) -> None:
    installer = HookInstaller(obj.repository())
    try:
        written = installer.install_hooks(directory)
    except RulesSyncError as exc:
        _fail(obj.ui, exc)
    obj.ui.render_hooks_installed(directory, written)


@cli.command("hooks-batch", help="Install git hooks into every repository under a directory.")
@_dir_argument()
@click.pass_obj
def hooks_batch(obj: AppContext, directory: Path) -> None:
    if not directory.is_dir():
        obj.ui.render_error(f"Target directory does not exist: {directory}")
        raise click.exceptions.Exit(1)

    installer = HookInstaller(obj.repository())
    try:
        repos, result = installer.install_hooks_batch(directory)
    except RulesSyncError as exc:
        _fail(obj.ui, exc)
    obj.ui.render_hooks_batch(directory, repos, result)
    if not result.ok:
        raise click.exceptions.Exit(1)


@cli.command("check-commit-msg", help="Validate a commit message file.")
@click.argument(
    "message_file",
    required=False,
    default=str(Path(GIT_DIRNAME) / COMMIT_MSG_FILENAME),
    type=click.Path(path_type=Path),
)
@click.pass_obj
def check_commit_msg(obj: AppContext, message_file: Path) -> None:
    check = check_commit_message_file(message_file)
    obj.ui.render_commit_check(check, GUIDANCE)
    if not check.ok:
        raise click.exceptions.Exit(1)


def main() -> int:
    # Without standalone mode click returns the exit code of ctx.exit/Exit.
    try:
        result = cli(standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return 2
    except click.Abort:
        return 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
