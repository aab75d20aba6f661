from cursor_rules_sync.tui.renderers import RulesConsoleUI

__all__ = ["RulesConsoleUI"]
