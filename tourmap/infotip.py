"""A small floating box that shows information next to the pointer."""

from __future__ import annotations

_TEMPLATE = (
    '<div style="background-color: white; color: black; font-size: 20px">{}</div>'
)


class InfoTip:
    """Holds the HTML, position and visibility of the info box."""

    Z_VALUE = 20
    OFFSET = 15

    def __init__(self) -> None:
        self.html = ""
        self.pos: tuple[float, float] = (0.0, 0.0)
        self.visible = True

    def show_text(self, text: str) -> None:
        """Set the text to display and make the tip visible."""
        self.html = _TEMPLATE.format(text)
        self.visible = True

    def show_at(self, x: float, y: float) -> None:
        """Place the tip just below and to the right of (x, y)."""
        self.pos = (x + self.OFFSET, y + self.OFFSET)

    def hide(self) -> None:
        """Make the tip invisible."""
        self.visible = False