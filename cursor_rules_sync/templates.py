"""Text templates for generated project rules and git hook scripts."""

from string import Template

from cursor_rules_sync.constants import APP_NAME, COMMIT_MSG_HOOK, RULES_FILENAME
from cursor_rules_sync.errors import TemplateRenderError


PROJECT_RULES_TEMPLATE = Template(
    """---
description: Project-specific rules for ${project_name}
globs: ["**/*.{js,jsx,ts,tsx,md,css,scss,html,py}"]
extends: ["${global_rules}"]
---

# ${project_name} Project Rules

@context {
    "type": "cursor_rules",
    "purpose": "project_standards",
    "format_version": "1.0.0",
    "extends": "global-rules"
}

## Project-Specific Guidelines

@project_rules {
    "architecture": "Define the architecture pattern for this project",
    "state_management": "Specify the state management approach",
    "api_integration": "Define how API integration should be handled"
}

<!-- Add your project-specific rules below -->

<rule>
name: project_specific_naming
description: Enforce project-specific naming conventions
filters:
  - type: file_extension
    pattern: "\\.(js|ts|jsx|tsx)$$"

actions:
  - type: suggest
    message: |
      Project-specific naming conventions:

      - API services: suffix with "Service" (e.g., userService)
      - Components: PascalCase, prefixed by feature (e.g., AuthLoginForm)
      - Add your own conventions here...

metadata:
  priority: medium
  version: 1.0
</rule>

<!-- Add more project-specific rules as needed -->
"""
)


_HOOK_HEADER = """#!/bin/sh
# Installed by ${app}. Re-applies shared Cursor rules; safe to overwrite.
ROOT="$$(git rev-parse --show-toplevel 2>/dev/null)" || exit 0
"""

_REFRESH_HOOK_TEMPLATE = Template(
    _HOOK_HEADER + '${app} --yes refresh "$$ROOT" || true\n' + "exit 0\n"
)

# git passes the path of the message being committed as $1.
_COMMIT_MSG_TEMPLATE = Template(
    """#!/bin/sh
# Installed by ${app}. Rejects commit messages outside <type>(<scope>): <description>.
command -v ${app} >/dev/null 2>&1 || exit 0
exec ${app} check-commit-msg "$$1"
"""
)


def render_project_rules(project_name: str) -> str:
    if not project_name or not project_name.strip():
        raise TemplateRenderError("Cannot render project rules without a project name")
    try:
        return PROJECT_RULES_TEMPLATE.substitute(
            project_name=project_name, global_rules=RULES_FILENAME
        )
    except (KeyError, ValueError) as exc:
        raise TemplateRenderError(f"Project rules template is invalid: {exc}") from exc


def render_hook(hook_name: str) -> str:
    template = _COMMIT_MSG_TEMPLATE if hook_name == COMMIT_MSG_HOOK else _REFRESH_HOOK_TEMPLATE
    return template.substitute(app=APP_NAME)
