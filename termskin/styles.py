"""Style groups describing the look of every UI region.

The tree has a fixed shape::

    Style
    ├── body
    ├── frame (title, border, menu, crumbs, status)
    ├── info
    └── views (table -> header, xray, charts, yaml, logs)

Every group is a frozen dataclass, so a tree can be shared between threads and
only changes by building a new one. Field names are snake_case in Python and
camelCase in skin documents (``fg_color`` <-> ``fgColor``); the few keys that
do not follow that rule are declared with ``_key``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any

from termskin.colors import ColorSequence, ColorValue

# Root key wrapping the style tree in skin documents
DOCUMENT_ROOT_KEY = "k9s"

# Named chart palettes, as (resource name, palette) pairs (hashable for frozen dataclass)
ResourcePalettes = tuple[tuple[str, ColorSequence], ...]


def _key(name: str) -> Any:
    """Declare a field whose document key is not its camelCase name."""
    return field(metadata={"key": name})


def document_key(field_name: str, metadata: Any = None) -> str:
    """Get the skin document key for a style field.

    Args:
        field_name: Python field name (snake_case).
        metadata: Dataclass field metadata, which may override the key.

    Returns:
        The document key (camelCase unless overridden).
    """
    if metadata and "key" in metadata:
        return str(metadata["key"])
    head, *rest = field_name.split("_")
    return head + "".join(part.capitalize() for part in rest)


class StyleGroup:
    """Shared behavior for style groups."""

    def to_dict(self) -> dict[str, object]:
        """Serialize the group to its skin document shape.

        Returns:
            Nested dictionary with plain string tokens.
        """
        data: dict[str, object] = {}
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            key = document_key(f.name, f.metadata)
            if is_dataclass(value):
                data[key] = value.to_dict()  # type: ignore[union-attr]
            elif isinstance(value, ColorSequence):
                data[key] = value.to_list()
            elif isinstance(value, ColorValue):
                data[key] = str(value)
            elif isinstance(value, bool):
                data[key] = value
            else:
                data[key] = {name: palette.to_list() for name, palette in value}
        return data


@dataclass(frozen=True)
class Body(StyleGroup):
    """Global foreground, background and logo colors."""

    fg_color: ColorValue
    bg_color: ColorValue
    logo_color: ColorValue


@dataclass(frozen=True)
class Title(StyleGroup):
    """View title bar colors."""

    fg_color: ColorValue
    bg_color: ColorValue
    highlight_color: ColorValue
    counter_color: ColorValue
    filter_color: ColorValue


@dataclass(frozen=True)
class Border(StyleGroup):
    """Frame border colors, blurred and focused."""

    fg_color: ColorValue
    focus_color: ColorValue


@dataclass(frozen=True)
class Menu(StyleGroup):
    """Key hint menu colors."""

    fg_color: ColorValue
    key_color: ColorValue
    num_key_color: ColorValue


@dataclass(frozen=True)
class Crumb(StyleGroup):
    """Breadcrumb colors."""

    fg_color: ColorValue
    bg_color: ColorValue
    active_color: ColorValue


@dataclass(frozen=True)
class Status(StyleGroup):
    """Colors for resource status rows."""

    new_color: ColorValue
    modify_color: ColorValue
    add_color: ColorValue
    error_color: ColorValue
    highlight_color: ColorValue
    kill_color: ColorValue
    completed_color: ColorValue


@dataclass(frozen=True)
class Frame(StyleGroup):
    """Everything drawn around the main views."""

    title: Title
    border: Border
    menu: Menu
    crumb: Crumb = _key("crumbs")
    status: Status


@dataclass(frozen=True)
class Info(StyleGroup):
    """Cluster info header colors."""

    section_color: ColorValue
    fg_color: ColorValue


@dataclass(frozen=True)
class TableHeader(StyleGroup):
    """Table header row colors."""

    fg_color: ColorValue
    bg_color: ColorValue
    sorter_color: ColorValue


@dataclass(frozen=True)
class Table(StyleGroup):
    """Resource table colors."""

    fg_color: ColorValue
    bg_color: ColorValue
    cursor_color: ColorValue
    mark_color: ColorValue
    header: TableHeader


@dataclass(frozen=True)
class Xray(StyleGroup):
    """Tree (xray) view colors."""

    fg_color: ColorValue
    bg_color: ColorValue
    cursor_color: ColorValue
    graphic_color: ColorValue
    show_icons: bool


@dataclass(frozen=True)
class Charts(StyleGroup):
    """Dial and chart colors for the pulse view."""

    bg_color: ColorValue
    dial_bg_color: ColorValue
    chart_bg_color: ColorValue
    default_dial_colors: ColorSequence
    default_chart_colors: ColorSequence
    resource_colors: ResourcePalettes

    def resource_palette(self, resource: str) -> ColorSequence | None:
        """Get the palette configured for a resource.

        Args:
            resource: Resource name (e.g. 'cpu', 'mem').

        Returns:
            The resource palette, or None if the skin does not define one.
        """
        return dict(self.resource_colors).get(resource)


@dataclass(frozen=True)
class Yaml(StyleGroup):
    """YAML viewer colors."""

    key_color: ColorValue
    value_color: ColorValue
    colon_color: ColorValue


@dataclass(frozen=True)
class Log(StyleGroup):
    """Log viewer colors."""

    fg_color: ColorValue
    bg_color: ColorValue


@dataclass(frozen=True)
class Views(StyleGroup):
    """Styles for the individual views."""

    table: Table
    xray: Xray
    charts: Charts
    yaml: Yaml
    log: Log = _key("logs")


@dataclass(frozen=True)
class Style(StyleGroup):
    """The complete style tree."""

    body: Body
    frame: Frame
    info: Info
    views: Views
