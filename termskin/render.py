"""Binding between skins and the Textual renderer.

The skin itself never draws anything. This module turns the resolved colors of
a style tree into what Textual consumes: the handful of base colors every
widget starts from, and a ``textual.theme.Theme`` that can be registered on an
``App``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from textual.color import Color
from textual.theme import Theme

from termskin.colors import ColorValue
from termskin.logger import get_logger
from termskin.styles import Style

if TYPE_CHECKING:
    from termskin.skin import Skin

logger = get_logger(__name__)

SKIN_THEME_NAME = "termskin"

# Fallbacks used where a skin color has no fixed RGB value (default, transparent, unknown)
FALLBACK_HEX = {
    "foreground": "#5f9ea0",
    "background": "#000000",
    "border": "#1e90ff",
    "focus": "#87cefa",
    "accent": "#ffa500",
    "error": "#ff4500",
    "success": "#98fb98",
    "warning": "#ffa500",
    "text_muted": "#d3d3d3",
}


@dataclass(frozen=True)
class RendererColors:
    """Base colors applied to every widget of the renderer."""

    primitive_background: Color
    contrast_background: Color
    primary_text: Color
    border: Color
    focus: Color

    @classmethod
    def from_style(cls, style: Style) -> RendererColors:
        """Resolve the renderer base colors from a style tree.

        Args:
            style: Style tree to resolve.

        Returns:
            The resolved base colors.
        """
        background = style.body.bg_color.resolve()
        return cls(
            primitive_background=background,
            contrast_background=background,
            primary_text=style.body.fg_color.resolve(),
            border=style.frame.border.fg_color.resolve(),
            focus=style.frame.border.focus_color.resolve(),
        )


def _has_rgb(color: Color) -> bool:
    """Check if a resolved color carries a fixed RGB value.

    Args:
        color: Resolved color.

    Returns:
        False for the renderer default and for transparent colors.
    """
    return color.ansi != -1 and color.a > 0


def _to_hex(value: ColorValue, fallback_key: str) -> str:
    """Convert a skin color to a hex string for a Textual theme.

    Args:
        value: Skin color token.
        fallback_key: Key into FALLBACK_HEX used when the color has no RGB value.

    Returns:
        Hex color string.
    """
    color = value.resolve()
    return color.hex if _has_rgb(color) else FALLBACK_HEX[fallback_key]


def build_textual_theme(style: Style, name: str = SKIN_THEME_NAME) -> Theme:
    """Build a Textual Theme from a style tree.

    Args:
        style: Style tree to convert.
        name: Name to register the theme under.

    Returns:
        A Textual Theme instance.
    """
    frame = style.frame
    table = style.views.table
    return Theme(
        name=name,
        primary=_to_hex(frame.border.focus_color, "focus"),
        secondary=_to_hex(frame.title.fg_color, "focus"),
        accent=_to_hex(frame.crumb.active_color, "accent"),
        warning=_to_hex(style.info.fg_color, "warning"),
        error=_to_hex(frame.status.error_color, "error"),
        success=_to_hex(table.mark_color, "success"),
        foreground=_to_hex(style.body.fg_color, "foreground"),
        background=_to_hex(style.body.bg_color, "background"),
        surface=_to_hex(table.bg_color, "background"),
        panel=_to_hex(frame.title.bg_color, "background"),
        dark=True,
        variables={
            "border": _to_hex(frame.border.fg_color, "border"),
            "text-muted": _to_hex(frame.status.completed_color, "text_muted"),
            "footer-key-foreground": _to_hex(frame.menu.key_color, "border"),
            "block-cursor-background": _to_hex(table.cursor_color, "focus"),
        },
    )


class TextualThemeListener:
    """Skin listener that keeps a Textual app's theme in sync with the skin."""

    def __init__(self, app: Any, theme_name: str = SKIN_THEME_NAME) -> None:
        """Initialize the listener.

        Args:
            app: The Textual App to re-theme.
            theme_name: Name the generated theme is registered under.
        """
        self.app = app
        self.theme_name = theme_name

    def skin_changed(self, skin: Skin) -> None:
        """Rebuild, register and activate the app theme.

        Args:
            skin: The skin holding the new style tree.
        """
        theme = build_textual_theme(skin.style, self.theme_name)
        self.app.register_theme(theme)
        self.app.theme = theme.name
        logger.debug(f"Applied skin theme {theme.name!r}")
