"""Built-in default skin.

The palette is tuned for readability on dark terminals. Every builder is pure:
it reads no external state and returns a fresh, fully populated group.
"""

from __future__ import annotations

from termskin.colors import DEFAULT_TOKEN, ColorSequence, ColorValue
from termskin.styles import (
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
    TableHeader,
    Title,
    Views,
    Xray,
    Yaml,
)

C = ColorValue


def default_body() -> Body:
    """Build the default body style."""
    return Body(fg_color=C("cadetblue"), bg_color=C("black"), logo_color=C("orange"))


def default_title() -> Title:
    """Build the default title style."""
    return Title(
        fg_color=C("aqua"),
        bg_color=C("black"),
        highlight_color=C("fuchsia"),
        counter_color=C("papayawhip"),
        filter_color=C("seagreen"),
    )


def default_border() -> Border:
    """Build the default border style."""
    return Border(fg_color=C("dodgerblue"), focus_color=C("lightskyblue"))


def default_menu() -> Menu:
    """Build the default menu style."""
    return Menu(fg_color=C("white"), key_color=C("dodgerblue"), num_key_color=C("fuchsia"))


def default_crumb() -> Crumb:
    """Build the default breadcrumb style."""
    return Crumb(fg_color=C("black"), bg_color=C("aqua"), active_color=C("orange"))


def default_status() -> Status:
    """Build the default status style."""
    return Status(
        new_color=C("lightskyblue"),
        modify_color=C("greenyellow"),
        add_color=C("dodgerblue"),
        error_color=C("orangered"),
        highlight_color=C("aqua"),
        kill_color=C("mediumpurple"),
        completed_color=C("lightgray"),
    )


def default_frame() -> Frame:
    """Build the default frame style."""
    return Frame(
        title=default_title(),
        border=default_border(),
        menu=default_menu(),
        crumb=default_crumb(),
        status=default_status(),
    )


def default_info() -> Info:
    """Build the default info style."""
    return Info(section_color=C("white"), fg_color=C("orange"))


def default_table_header() -> TableHeader:
    """Build the default table header style."""
    return TableHeader(fg_color=C("white"), bg_color=C("black"), sorter_color=C("aqua"))


def default_table() -> Table:
    """Build the default table style."""
    return Table(
        fg_color=C("aqua"),
        bg_color=C("black"),
        cursor_color=C("aqua"),
        mark_color=C("palegreen"),
        header=default_table_header(),
    )


def default_xray() -> Xray:
    """Build the default xray style."""
    return Xray(
        fg_color=C("aqua"),
        bg_color=C("black"),
        cursor_color=C("whitesmoke"),
        graphic_color=C("floralwhite"),
        show_icons=True,
    )


def default_charts() -> Charts:
    """Build the default charts style.

    Charts draw on the terminal's own background, and no resource has a
    dedicated palette until a skin defines one.
    """
    return Charts(
        bg_color=C(DEFAULT_TOKEN),
        dial_bg_color=C(DEFAULT_TOKEN),
        chart_bg_color=C(DEFAULT_TOKEN),
        default_dial_colors=ColorSequence(["palegreen", "orangered"]),
        default_chart_colors=ColorSequence(["palegreen", "orangered"]),
        resource_colors=(),
    )


def default_yaml() -> Yaml:
    """Build the default YAML viewer style."""
    return Yaml(key_color=C("steelblue"), value_color=C("papayawhip"), colon_color=C("white"))


def default_log() -> Log:
    """Build the default log viewer style."""
    return Log(fg_color=C("lightskyblue"), bg_color=C("black"))


def default_views() -> Views:
    """Build the default views style."""
    return Views(
        table=default_table(),
        xray=default_xray(),
        charts=default_charts(),
        yaml=default_yaml(),
        log=default_log(),
    )


def build_default_style() -> Style:
    """Build the complete default style tree.

    Returns:
        A fully populated Style. Two calls return equal trees.
    """
    return Style(
        body=default_body(),
        frame=default_frame(),
        info=default_info(),
        views=default_views(),
    )
