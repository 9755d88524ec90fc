"""Decoding of skin documents and merging onto the active style tree.

Loading is done in two steps so a bad document never half-applies:

1. ``decode_overlay`` parses the YAML and checks it against the fixed tree
   shape, producing a sparse overlay that holds only the fields the document
   sets.
2. ``merge_overlay`` builds a new tree from the current one, replacing only
   the overlaid fields.

Unknown keys are ignored. ``null`` values and blank color strings count as
absent, so a field always keeps a usable token. A value of the wrong type
aborts the whole load with ``SkinDecodeError``.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from functools import cache
from typing import Any, get_type_hints

import yaml

from termskin.colors import ColorSequence, ColorValue
from termskin.errors import SkinDecodeError
from termskin.logger import get_logger
from termskin.styles import DOCUMENT_ROOT_KEY, ResourcePalettes, Style, document_key

logger = get_logger(__name__)

# Sparse nested mapping of Python field name -> decoded value or nested overlay
Overlay = dict[str, Any]


@cache
def _field_layout(group: type) -> tuple[tuple[str, str, Any], ...]:
    """Get (field name, document key, type) triples for a style group.

    Args:
        group: Style group dataclass.

    Returns:
        Field triples in declaration order.
    """
    hints = get_type_hints(group)
    return tuple(
        (f.name, document_key(f.name, f.metadata), hints[f.name]) for f in dataclasses.fields(group)
    )


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _decode_color(raw: object, path: str) -> ColorValue:
    if not isinstance(raw, str):
        raise SkinDecodeError(f"expected a color string, got {type(raw).__name__}", path)
    return ColorValue(raw)


def _decode_sequence(raw: object, path: str) -> ColorSequence:
    if not isinstance(raw, list):
        raise SkinDecodeError(f"expected a list of colors, got {type(raw).__name__}", path)
    return ColorSequence(_decode_color(item, f"{path}[{index}]") for index, item in enumerate(raw))


def _decode_palettes(raw: object, path: str) -> ResourcePalettes:
    if not isinstance(raw, dict):
        raise SkinDecodeError(f"expected a mapping of palettes, got {type(raw).__name__}", path)
    palettes: list[tuple[str, ColorSequence]] = []
    for name, colors in raw.items():
        if colors is None:
            continue
        palettes.append((str(name), _decode_sequence(colors, _join(path, str(name)))))
    return tuple(palettes)


def _decode_group(group: type, raw: object, path: str) -> Overlay:
    """Decode one style group into a sparse overlay.

    Args:
        group: Style group dataclass the document section describes.
        raw: Decoded YAML value for the section.
        path: Dotted document path of the section.

    Returns:
        Overlay holding only the fields present in the section.

    Raises:
        SkinDecodeError: If the section or one of its fields has the wrong type.
    """
    if not isinstance(raw, dict):
        raise SkinDecodeError(f"expected a mapping, got {type(raw).__name__}", path or None)

    overlay: Overlay = {}
    known_keys: set[str] = set()
    for name, key, hint in _field_layout(group):
        known_keys.add(key)
        value = raw.get(key)
        if value is None:
            continue
        field_path = _join(path, key)
        if hint is ColorValue:
            color = _decode_color(value, field_path)
            if not color.strip():
                logger.debug(f"Ignoring blank color at {field_path!r}")
                continue
            overlay[name] = color
        elif hint is ColorSequence:
            overlay[name] = _decode_sequence(value, field_path)
        elif hint is bool:
            if not isinstance(value, bool):
                raise SkinDecodeError(f"expected true or false, got {type(value).__name__}", field_path)
            overlay[name] = value
        elif hint == ResourcePalettes:
            overlay[name] = _decode_palettes(value, field_path)
        else:
            overlay[name] = _decode_group(hint, value, field_path)

    for key in raw:
        if key not in known_keys:
            logger.debug(f"Ignoring unknown skin key {_join(path, str(key))!r}")
    return overlay


def decode_overlay(source: bytes | str) -> Overlay:
    """Decode a skin document into a sparse overlay.

    Args:
        source: Raw YAML document.

    Returns:
        Overlay for the style tree. Empty if the document sets nothing.

    Raises:
        SkinDecodeError: If the document is not valid YAML or does not match
            the style tree shape.
    """
    try:
        document = yaml.safe_load(source)
    except yaml.YAMLError as exc:
        raise SkinDecodeError(f"invalid YAML: {exc}") from exc

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise SkinDecodeError(f"expected a mapping at the document root, got {type(document).__name__}")

    root = document.get(DOCUMENT_ROOT_KEY)
    if root is None:
        logger.debug(f"Skin document has no {DOCUMENT_ROOT_KEY!r} section")
        return {}
    return _decode_group(Style, root, DOCUMENT_ROOT_KEY)


def _merge_palettes(current: ResourcePalettes, incoming: ResourcePalettes) -> ResourcePalettes:
    merged = dict(current)
    merged.update(incoming)
    return tuple(merged.items())


def merge_overlay(group: Any, overlay: Mapping[str, Any]) -> Any:
    """Merge an overlay onto a style group.

    Args:
        group: Current style group (any level of the tree).
        overlay: Sparse overlay for that group.

    Returns:
        A new group with the overlaid fields replaced, or the same group if
        the overlay is empty.
    """
    if not overlay:
        return group

    changes: dict[str, Any] = {}
    for name, value in overlay.items():
        current = getattr(group, name)
        if isinstance(value, dict):
            changes[name] = merge_overlay(current, value)
        elif name == "resource_colors":
            changes[name] = _merge_palettes(current, value)
        else:
            changes[name] = value
    return dataclasses.replace(group, **changes)


def merge_document(style: Style, source: bytes | str) -> Style:
    """Decode a skin document and merge it onto a style tree.

    Args:
        style: The current style tree.
        source: Raw YAML document.

    Returns:
        The merged style tree.

    Raises:
        SkinDecodeError: If the document cannot be decoded.
    """
    return merge_overlay(style, decode_overlay(source))
