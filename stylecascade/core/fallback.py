"""Three tier setting lookup: override store, then base store, then default.

An override store of ``None`` means there is no user configuration at all;
lookups then return the compiled default without consulting the base
store. An override store that simply lacks the key falls through to base.

List valued settings take the first list found and resolve each element on
its own, so a short or partly malformed list only loses the affected
elements. Nothing here raises on bad data.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence, TypeVar

from .colors import parse_bool, parse_color, parse_int
from .model import StyleAttribute
from .settings import SettingsStore

T = TypeVar("T")


def lookup_string(
    section: str,
    key: str,
    override: Optional[SettingsStore],
    base: Optional[SettingsStore],
) -> Optional[str]:
    if override is None:
        return None
    value = override.get_string(section, key)
    if value is None and base is not None:
        value = base.get_string(section, key)
    return value


def lookup_list(
    section: str,
    key: str,
    override: Optional[SettingsStore],
    base: Optional[SettingsStore],
) -> Optional[list[str]]:
    if override is None:
        return None
    values = override.get_string_list(section, key)
    if values is None and base is not None:
        values = base.get_string_list(section, key)
    return values


def resolve(
    section: str,
    key: str,
    override: Optional[SettingsStore],
    base: Optional[SettingsStore],
    default: T,
    parse: Optional[Callable[[str], Optional[T]]] = None,
) -> T:
    """Resolve a scalar setting, optionally parsed."""
    text = lookup_string(section, key, override, base)
    if text is None:
        return default
    if parse is None:
        return text  # type: ignore[return-value]
    value = parse(text)
    return default if value is None else value


def resolve_string(section, key, override, base, default: str) -> str:
    return resolve(section, key, override, base, default)


def resolve_elements(
    values: Optional[Sequence[str]],
    defaults: Sequence[T],
    parsers: Sequence[Callable[[str], Optional[T]]],
) -> list[T]:
    """Parse each list element, falling back element-wise to ``defaults``."""
    result = []
    for index, (default, parse) in enumerate(zip(defaults, parsers)):
        parsed = None
        if values is not None and index < len(values):
            parsed = parse(values[index])
        result.append(default if parsed is None else parsed)
    return result


_STYLE_PARSERS = (parse_color, parse_color, parse_bool, parse_bool)


def resolve_style(
    key: str,
    override: Optional[SettingsStore],
    base: Optional[SettingsStore],
    default: StyleAttribute,
    section: str = "styling",
) -> StyleAttribute:
    """Resolve a ``fg,bg,bold,italic`` style list."""
    values = lookup_list(section, key, override, base)
    if values is None:
        return default
    fg, bg, bold, italic = resolve_elements(
        values,
        (default.foreground, default.background, default.bold, default.italic),
        _STYLE_PARSERS,
    )
    return StyleAttribute(fg, bg, bold, italic)


def resolve_int_pair(
    key: str,
    override: Optional[SettingsStore],
    base: Optional[SettingsStore],
    defaults: tuple[int, int],
    section: str = "styling",
) -> tuple[int, int]:
    """Resolve a two element integer list such as ``folding_style = 1,2``."""
    values = lookup_list(section, key, override, base)
    first, second = resolve_elements(values, defaults, (parse_int, parse_int))
    return first, second
