from pathlib import Path
from typing import Sequence


class RulesSyncError(Exception):
    """Base user-facing application error."""


class SyncFileError(RulesSyncError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class InvalidJsonFormatError(SyncFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid JSON format ({detail})")


class InvalidConfigSchemaError(SyncFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")


class SyncError(RulesSyncError):
    """Rules repository could not be brought up to date."""


class GitCommandError(SyncError):
    def __init__(self, argv: Sequence[str], returncode: int, stderr: str) -> None:
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or f"exit status {returncode}"
        super().__init__(f"git {' '.join(self.argv[1:])} failed: {detail}")


class RulesDocumentMissingError(SyncError, SyncFileError):
    def __init__(self, path: Path) -> None:
        SyncFileError.__init__(self, path=path, message="Rules file not found")


class DeployError(RulesSyncError):
    """Rules could not be materialized into a target project."""


class TargetDirectoryMissingError(DeployError, SyncFileError):
    def __init__(self, path: Path) -> None:
        SyncFileError.__init__(self, path=path, message="Target directory does not exist")


class SourceDocumentMissingError(DeployError, SyncFileError):
    def __init__(self, path: Path) -> None:
        SyncFileError.__init__(self, path=path, message="Global rules file not found")


class DeployCancelledError(DeployError, SyncFileError):
    def __init__(self, path: Path) -> None:
        SyncFileError.__init__(self, path=path, message="Operation cancelled")


class ArtifactWriteError(DeployError, SyncFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        SyncFileError.__init__(self, path=path, message=f"Failed to write rules ({detail})")


class InitError(RulesSyncError):
    """Project initialization failed."""


class TemplateRenderError(InitError):
    pass


class HookError(RulesSyncError):
    """Git hooks could not be installed."""


class NotAGitRepositoryError(HookError, SyncFileError):
    def __init__(self, path: Path) -> None:
        SyncFileError.__init__(
            self,
            path=path,
            message="Not a git repository. Initialize with 'git init' first",
        )


class HookWriteError(HookError, SyncFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        SyncFileError.__init__(self, path=path, message=f"Failed to write hook ({detail})")
