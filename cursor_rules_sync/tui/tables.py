from pathlib import Path

from rich.panel import Panel
from rich.table import Column, Table
from rich.tree import Tree

from cursor_rules_sync.models import ActionResult, BatchResult
from cursor_rules_sync.tui.enums import ACTION_STATUS_STYLE, UIStyle
from cursor_rules_sync.utils import compact_home_path


class ActionTable:
    @staticmethod
    def results_table(results: list[ActionResult]) -> Table:
        table = Table(
            Column(header="Type", width=10),
            Column(header="Status", width=8),
            Column(header="Target", overflow="ellipsis"),
            Column(header="Backup", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for result in results:
            action = result.action
            style = ACTION_STATUS_STYLE.get(action.status, UIStyle.WHITE.value)
            backup = compact_home_path(result.backup) if result.backup else ""
            table.add_row(
                action.kind.value,
                f"[{style}]{action.status.value}[/{style}]",
                compact_home_path(action.path),
                backup,
            )
        return table


class BatchTable:
    @staticmethod
    def stats_panel(title: str, result: BatchResult) -> Panel:
        stats: dict[str, str] = {
            "succeeded": str(result.success_count),
            "failed": str(result.fail_count),
        }
        table = Table(show_header=False, box=None)
        for key, value in stats.items():
            table.add_row(f"[bold]{key}[/bold]", value)
        return Panel(
            table,
            title=title,
            border_style=UIStyle.GREEN.value if result.ok else UIStyle.RED.value,
        )

    @staticmethod
    def repos_table(repos: list[Path], base_dir: Path) -> Table:
        table = Table(
            Column(header="Repository", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        base = base_dir.resolve()
        for repo in repos:
            label = "." if repo == base else str(repo.relative_to(base))
            table.add_row(label)
        return table


class LayoutTree:
    @staticmethod
    def project_layout(target_dir: Path, rules_filename: str, project_filename: str) -> Tree:
        tree = Tree(f"{target_dir}/")
        rules = tree.add(".cursor/").add("rules/")
        rules.add(f"{rules_filename} (from your global config)")
        rules.add(f"{project_filename} (project-specific rules)")
        return tree
