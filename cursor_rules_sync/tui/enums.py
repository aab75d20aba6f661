from enum import Enum

from cursor_rules_sync.models import ActionStatus


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    DIM = "dim"
    WHITE = "white"


class Glyph(str, Enum):
    OK = "✅"
    FAIL = "❌"
    WARN = "⚠️"
    INFO = "ℹ️"
    BACKUP = "📄"
    SYNC = "🔄"
    DONE = "🎉"


ACTION_STATUS_STYLE = {
    ActionStatus.CREATE: UIStyle.GREEN.value,
    ActionStatus.REPLACE: UIStyle.CYAN.value,
    ActionStatus.FIX: UIStyle.YELLOW.value,
    ActionStatus.NOOP: UIStyle.DIM.value,
}
