"""Color tokens and their resolution to renderer colors.

Skins describe colors as plain text tokens (``"cadetblue"``, ``"#ff8700"``,
``"bright_red"``). A token is only turned into a concrete Textual color when
something needs to draw with it, and resolution never fails: a token that
cannot be understood degrades to the renderer default instead of breaking the
UI.

Usage:
    from termskin.colors import ColorValue, ColorSequence

    fg = ColorValue("cadetblue").resolve()
    palette = ColorSequence(["palegreen", "orangered"]).resolve_all()
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache

from rich.color import Color as RichColor
from rich.color import ColorParseError as RichColorParseError
from textual.color import Color, ColorParseError

from termskin.logger import get_logger

logger = get_logger(__name__)

# Reserved tokens
DEFAULT_TOKEN = "default"
TRANSPARENT_TOKEN = "-"

# Concrete sentinels handed to the renderer for the reserved tokens
RENDERER_DEFAULT = Color(0, 0, 0, ansi=-1)
TERMINAL_BACKGROUND = Color(0, 0, 0, 0.0)

# Unreadable tokens fall back to whatever the terminal would draw by default
UNKNOWN_COLOR = RENDERER_DEFAULT


class ColorValue(str):
    """A textual color designator from a skin.

    The token text is the value: two color values are equal when their
    tokens are, and ``str()`` returns the token unchanged.
    """

    __slots__ = ()

    @classmethod
    def new(cls, text: str) -> ColorValue:
        """Create a color value from raw text.

        Args:
            text: Color token (name, hex code or reserved token).

        Returns:
            The color value.
        """
        return cls(text)

    @property
    def is_default(self) -> bool:
        """Whether this is the reserved renderer-default token."""
        return self.strip().lower() == DEFAULT_TOKEN

    @property
    def is_transparent(self) -> bool:
        """Whether this is the reserved terminal-background token."""
        return self.strip() == TRANSPARENT_TOKEN

    def resolve(self) -> Color:
        """Resolve the token to a concrete Textual color.

        Returns:
            The resolved color, or ``UNKNOWN_COLOR`` for unreadable tokens.
        """
        return resolve_token(str(self))

    def __repr__(self) -> str:
        return f"ColorValue({str(self)!r})"


class ColorSequence(tuple[ColorValue, ...]):
    """An ordered palette of color values.

    Order matters (it is the palette index) and duplicates are allowed.
    """

    __slots__ = ()

    def __new__(cls, colors: Iterable[str] = ()) -> ColorSequence:
        return super().__new__(cls, (ColorValue(color) for color in colors))

    def resolve_all(self) -> tuple[Color, ...]:
        """Resolve every color in the palette, keeping order and length.

        Returns:
            Tuple of concrete Textual colors.
        """
        return tuple(color.resolve() for color in self)

    def to_list(self) -> list[str]:
        """Serialize the palette as plain strings."""
        return [str(color) for color in self]

    def __repr__(self) -> str:
        return f"ColorSequence({self.to_list()!r})"


@lru_cache(maxsize=1024)
def resolve_token(token: str) -> Color:
    """Resolve a color token to a concrete Textual color.

    Tokens are trimmed and lower-cased first, so reserved tokens match in any
    case and with surrounding whitespace. Reserved tokens map to their
    sentinels. Named colors come from Textual's
    CSS color table; other tokens go through Textual's color syntax (hex,
    ``rgb()``, ``hsl()``, ``ansi_*``) and then Rich's ANSI names and
    ``color(N)`` syntax.

    Args:
        token: Color token text.

    Returns:
        The resolved color. Never raises.
    """
    normalized = token.strip().lower()
    if normalized == DEFAULT_TOKEN:
        return RENDERER_DEFAULT
    if normalized == TRANSPARENT_TOKEN:
        return TERMINAL_BACKGROUND
    if not normalized:
        logger.debug("Empty color token, using fallback color")
        return UNKNOWN_COLOR

    try:
        return Color.parse(normalized)
    except ColorParseError:
        pass

    try:
        return Color.from_rich_color(RichColor.parse(normalized))
    except RichColorParseError:
        logger.debug(f"Unknown color token {token!r}, using fallback color")
        return UNKNOWN_COLOR
