"""The active skin: style tree, listeners and load/reset orchestration."""

from __future__ import annotations

from pathlib import Path
from threading import RLock

from textual.color import Color

from termskin.defaults import build_default_style
from termskin.errors import SkinDecodeError
from termskin.listeners import ListenerRegistry, SkinListener
from termskin.loader import merge_document
from termskin.logger import get_logger
from termskin.render import RendererColors
from termskin.settings import get_skin_path
from termskin.styles import (
    DOCUMENT_ROOT_KEY,
    Body,
    Border,
    Charts,
    Crumb,
    Frame,
    Info,
    Log,
    Menu,
    Status,
    Style,
    Table,
    Title,
    Views,
    Xray,
    Yaml,
)

logger = get_logger(__name__)


class Skin:
    """Owner of the one active style tree.

    The tree is immutable and is swapped as a whole under a lock, so readers
    always see either the old or the new tree. Listeners are notified on the
    caller's thread after the swap, outside the lock.
    """

    def __init__(self, style: Style | None = None) -> None:
        """Initialize the skin.

        Args:
            style: Initial style tree (defaults to the built-in skin).
        """
        self._lock = RLock()
        self._style = style if style is not None else build_default_style()
        self._listeners = ListenerRegistry()
        self.renderer_colors: RendererColors | None = None

    # Listeners

    def add_listener(self, listener: SkinListener) -> None:
        """Register a listener for skin changes.

        Args:
            listener: Listener to register.
        """
        with self._lock:
            self._listeners.add(listener)

    def remove_listener(self, listener: SkinListener) -> None:
        """Unregister a listener. Unknown listeners are ignored.

        Args:
            listener: Listener to remove.
        """
        with self._lock:
            self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        """Number of registered listeners."""
        with self._lock:
            return len(self._listeners)

    def notify_all(self) -> None:
        """Notify every registered listener that the skin changed.

        Raises:
            ListenerError: If one or more listeners raised.
        """
        with self._lock:
            listeners = self._listeners.snapshot()
        self._listeners.notify_all(self, listeners)

    # Loading

    def load(self, source: bytes | str) -> None:
        """Merge a skin document onto the active tree and notify listeners.

        Fields missing from the document keep their current value.

        Args:
            source: Raw YAML skin document.

        Raises:
            SkinDecodeError: If the document is invalid. The active tree is
                left unchanged.
            ListenerError: If a listener failed after the new tree was applied.
        """
        with self._lock:
            try:
                self._style = merge_document(self._style, source)
            except SkinDecodeError as exc:
                logger.warning(f"Rejected skin definition: {exc}")
                raise
        logger.info("Skin definition loaded")
        self.notify_all()

    def load_file(self, path: str | Path) -> None:
        """Load a skin document from a file.

        Args:
            path: Path to the YAML skin file.

        Raises:
            SkinDecodeError: If the file cannot be read or decoded.
            ListenerError: If a listener failed after the new tree was applied.
        """
        skin_path = Path(path).expanduser()
        try:
            source = skin_path.read_bytes()
        except OSError as exc:
            logger.warning(f"Failed to read skin file {skin_path}: {exc}")
            raise SkinDecodeError(f"cannot read skin file {skin_path}: {exc}") from exc
        logger.info(f"Loading skin from {skin_path}")
        self.load(source)

    def reset(self) -> None:
        """Replace the active tree with the built-in skin and notify listeners.

        Raises:
            ListenerError: If a listener failed.
        """
        with self._lock:
            self._style = build_default_style()
        logger.info("Skin reset to defaults")
        self.notify_all()

    def apply_and_notify(self) -> RendererColors:
        """Resolve the renderer base colors, store them and notify listeners.

        Returns:
            The resolved renderer colors.

        Raises:
            ListenerError: If a listener failed.
        """
        with self._lock:
            self.renderer_colors = RendererColors.from_style(self._style)
            colors = self.renderer_colors
        self.notify_all()
        return colors

    def to_dict(self) -> dict[str, object]:
        """Serialize the active tree as a skin document.

        Returns:
            Dictionary with the tree under the document root key.
        """
        return {DOCUMENT_ROOT_KEY: self.style.to_dict()}

    # Accessors

    @property
    def style(self) -> Style:
        """Snapshot of the active style tree."""
        with self._lock:
            return self._style

    @property
    def body(self) -> Body:
        """Body styles."""
        return self.style.body

    @property
    def frame(self) -> Frame:
        """Frame styles."""
        return self.style.frame

    @property
    def title(self) -> Title:
        """Title styles."""
        return self.frame.title

    @property
    def border(self) -> Border:
        """Border styles."""
        return self.frame.border

    @property
    def menu(self) -> Menu:
        """Menu styles."""
        return self.frame.menu

    @property
    def crumb(self) -> Crumb:
        """Breadcrumb styles."""
        return self.frame.crumb

    @property
    def status(self) -> Status:
        """Status styles."""
        return self.frame.status

    @property
    def info(self) -> Info:
        """Info styles."""
        return self.style.info

    @property
    def views(self) -> Views:
        """View styles."""
        return self.style.views

    @property
    def table(self) -> Table:
        """Table styles."""
        return self.views.table

    @property
    def xray(self) -> Xray:
        """Xray styles."""
        return self.views.xray

    @property
    def charts(self) -> Charts:
        """Chart styles."""
        return self.views.charts

    @property
    def yaml(self) -> Yaml:
        """YAML viewer styles."""
        return self.views.yaml

    @property
    def log(self) -> Log:
        """Log viewer styles."""
        return self.views.log

    def fg_color(self) -> Color:
        """Resolved global foreground color."""
        return self.body.fg_color.resolve()

    def bg_color(self) -> Color:
        """Resolved global background color."""
        return self.body.bg_color.resolve()

    def border_color(self) -> Color:
        """Resolved border color."""
        return self.border.fg_color.resolve()

    def focus_color(self) -> Color:
        """Resolved focused border color."""
        return self.border.focus_color.resolve()


def load_skin(path: str | Path | None = None) -> Skin:
    """Create a skin and apply the user's skin file if there is one.

    A skin file that cannot be loaded is logged and the defaults are kept.

    Args:
        path: Skin file to load (defaults to the configured skin file).

    Returns:
        The skin.
    """
    skin = Skin()
    skin_path = Path(path).expanduser() if path is not None else get_skin_path()
    if not skin_path.exists():
        logger.debug(f"No skin file at {skin_path}, using defaults")
        return skin

    try:
        skin.load_file(skin_path)
    except SkinDecodeError as exc:
        logger.warning(f"Ignoring skin file {skin_path}: {exc}")
    return skin
