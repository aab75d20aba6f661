from pathlib import Path

from rich.console import Console
from rich.markup import escape

from cursor_rules_sync.constants import PROJECT_RULES_FILENAME
from cursor_rules_sync.models import (
    ActionKind,
    ActionResult,
    ActionStatus,
    BatchResult,
    CommitCheck,
    InitReport,
)
from cursor_rules_sync.tui.enums import Glyph, UIStyle
from cursor_rules_sync.tui.sections import UISection
from cursor_rules_sync.tui.tables import ActionTable, BatchTable, LayoutTree
from cursor_rules_sync.utils import compact_home_path, compact_home_paths_in_text


class RulesConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def status(self, glyph: Glyph, message: str, style: str = UIStyle.WHITE.value) -> None:
        self.console.print(f"{glyph.value} [{style}]{escape(message)}[/{style}]")

    def render_error(self, message: str) -> None:
        self.status(Glyph.FAIL, compact_home_paths_in_text(message), UIStyle.RED.value)

    def render_sync_started(self) -> None:
        self.status(Glyph.SYNC, "Updating cursor rules from repository...", UIStyle.BLUE.value)

    def render_sync_result(self, rules_path: Path) -> None:
        self.status(
            Glyph.OK,
            f"Rules repository updated successfully ({compact_home_path(rules_path)})",
            UIStyle.GREEN.value,
        )

    def render_deploy_result(self, result: ActionResult, target_dir: Path) -> None:
        if result.backup is not None:
            self.status(
                Glyph.BACKUP,
                f"Existing rules backed up to {compact_home_path(result.backup)}",
                UIStyle.YELLOW.value,
            )
        if result.action.status == ActionStatus.NOOP:
            self.status(
                Glyph.INFO,
                f"Cursor rules already up to date in {target_dir}",
                UIStyle.DIM.value,
            )
            return
        verb = "symlinked" if result.action.kind == ActionKind.SYMLINK else "applied"
        self.status(
            Glyph.OK, f"Cursor rules {verb} successfully to {target_dir}", UIStyle.GREEN.value
        )

    def render_batch_result(self, title: str, result: BatchResult) -> None:
        self.console.print(BatchTable.stats_panel(title, result))
        if result.failures:
            failure_text = "\n".join(
                [f"- {compact_home_paths_in_text(item)}" for item in result.failures]
            )
            self.console.print(
                UISection.note("failures", failure_text, style=UIStyle.RED.value, glyph=Glyph.FAIL)
            )

    def render_results(self, title: str, results: list[ActionResult]) -> None:
        self.console.print(
            UISection.wrap(title, ActionTable.results_table(results), style=UIStyle.CYAN.value)
        )

    def render_init_result(
        self, report: InitReport, target_dir: Path, rules_filename: str
    ) -> None:
        results = [item for item in (report.project_rules, report.global_rules) if item]
        if results:
            self.render_results("init", results)
        for line in report.skipped:
            self.status(Glyph.WARN, compact_home_paths_in_text(line), UIStyle.YELLOW.value)

        self.status(
            Glyph.DONE,
            "Project initialized successfully with Cursor rules!",
            UIStyle.GREEN.value,
        )
        self.console.print(
            UISection.wrap(
                "structure",
                LayoutTree.project_layout(target_dir, rules_filename, PROJECT_RULES_FILENAME),
                style=UIStyle.BLUE.value,
            )
        )
        self.console.print(
            UISection.note(
                "next",
                "Customize project-specific rules at:\n"
                f"  {compact_home_path(report.rules_dir / PROJECT_RULES_FILENAME)}",
                style=UIStyle.DIM.value,
            )
        )

    def render_hooks_installed(self, project_dir: Path, hooks: list[Path]) -> None:
        names = ", ".join(path.name for path in hooks)
        self.status(
            Glyph.OK,
            f"Git hooks installed in {project_dir} ({names}). "
            "Cursor rules will be applied automatically after checkout, merge and rebase.",
            UIStyle.GREEN.value,
        )

    def render_hooks_batch(
        self, base_dir: Path, repos: list[Path], result: BatchResult
    ) -> None:
        if not repos:
            self.console.print(
                UISection.note(
                    "hooks",
                    f"No git repositories found under {compact_home_path(base_dir)}.",
                    style=UIStyle.YELLOW.value,
                    glyph=Glyph.WARN,
                )
            )
            return
        self.console.print(
            UISection.wrap(
                "repositories",
                BatchTable.repos_table(repos, base_dir),
                style=UIStyle.CYAN.value,
            )
        )
        self.render_batch_result("hooks", result)

    def render_commit_check(self, check: CommitCheck, guidance: str) -> None:
        if check.ok:
            return
        self.console.print(
            UISection.note(
                "commit message rejected",
                f"{check.reason}\n\n{guidance}",
                style=UIStyle.RED.value,
                glyph=Glyph.FAIL,
            )
        )
