from typing import Optional

from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text

from cursor_rules_sync.tui.enums import Glyph, UIStyle


def _heading(title: str, glyph: Optional[Glyph]) -> str:
    return f"{glyph.value} {title}" if glyph is not None else title


class UISection:
    @staticmethod
    def wrap(
        title: str,
        body: RenderableType,
        style: str = UIStyle.BLUE.value,
        glyph: Optional[Glyph] = None,
    ) -> Panel:
        return Panel(
            body,
            title=_heading(title, glyph),
            title_align="left",
            border_style=style,
            padding=(0, 1),
        )

    @staticmethod
    def note(title: str, body: str, style: str, glyph: Optional[Glyph] = None) -> Panel:
        """Plain-text panel; paths and commit messages are never read as markup."""
        return Panel(
            Text(body),
            title=_heading(title, glyph),
            title_align="left",
            border_style=style,
            padding=(0, 1),
        )
