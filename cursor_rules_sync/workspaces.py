import os
from pathlib import Path

from cursor_rules_sync.constants import GIT_DIRNAME, WORKSPACE_IGNORED_DIRS


class WorkspaceService:
    def is_git_repo(self, path: Path) -> bool:
        return (path / GIT_DIRNAME).is_dir()

    def discover_git_repos(self, workspace_path: Path) -> list[Path]:
        """Find repositories under a base directory, the base itself included.

        Hidden directories and dependency caches are skipped, and the walk does
        not descend into a repository once found.
        """
        repos: list[Path] = []
        workspace_real = workspace_path.resolve()

        for root, dir_names, _ in os.walk(str(workspace_real), topdown=True):
            current = Path(root)
            if self.is_git_repo(current):
                repos.append(current)
                dir_names[:] = []
                continue

            dir_names[:] = [
                name
                for name in dir_names
                if not name.startswith(".") and name not in WORKSPACE_IGNORED_DIRS
            ]

        return sorted(set(repos))
