"""Skins (color themes) for terminal user interfaces."""

from termskin.colors import ColorSequence, ColorValue
from termskin.defaults import build_default_style
from termskin.errors import ListenerError, SkinDecodeError, SkinError
from termskin.listeners import ListenerRegistry, SkinListener
from termskin.render import RendererColors, TextualThemeListener, build_textual_theme
from termskin.skin import Skin, load_skin
from termskin.styles import Style

__all__ = [
    "ColorSequence",
    "ColorValue",
    "ListenerError",
    "ListenerRegistry",
    "RendererColors",
    "Skin",
    "SkinDecodeError",
    "SkinError",
    "SkinListener",
    "Style",
    "TextualThemeListener",
    "build_default_style",
    "build_textual_theme",
    "load_skin",
]
