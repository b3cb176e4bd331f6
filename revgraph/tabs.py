"""Tab switching, scrolling, font sizing and keyboard shortcuts of the main window."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, Optional

_MAX_TAB_INDEX = 99
_MIN_POINT_SIZE = 2


class TabKind(Enum):
    REV = "rev"
    PATCH = "patch"
    FILE = "file"


class FileDoubleClickAction(IntEnum):
    VIEW_PATCH = 0
    OPEN_IN_EDITOR = 1
    OPEN_IN_DIFFER = 2


@dataclass(frozen=True)
class Shortcut:
    """Command bound to a key: ``action`` with an optional step or tab."""

    action: str
    value: int = 0
    tab: Optional[TabKind] = None


_SHORTCUTS = {
    "I": Shortcut("key_up"),
    "K": Shortcut("key_down"),
    "N": Shortcut("key_down"),
    "Shift+Up": Shortcut("go_match", -1),
    "Shift+Down": Shortcut("go_match", 1),
    "Left": Shortcut("back"),
    "Right": Shortcut("forward"),
    "Ctrl++": Shortcut("adjust_font", 1),
    "Ctrl+-": Shortcut("adjust_font", -1),
    "U": Shortcut("scroll_text", -18),
    "D": Shortcut("scroll_text", 18),
    "Delete": Shortcut("scroll_text", -1),
    "B": Shortcut("scroll_text", -1),
    "Backspace": Shortcut("scroll_text", -1),
    "Space": Shortcut("scroll_text", 1),
    "R": Shortcut("show_tab", tab=TabKind.REV),
    "P": Shortcut("next_tab", tab=TabKind.PATCH),
    "F": Shortcut("next_tab", tab=TabKind.FILE),
}


def cycle_tab(index: int, count: int, delta: int) -> int:
    """Tab reached by a wheel turn of *delta*: negative moves right, wrapping."""
    if count <= 0:
        raise ValueError(f"no tabs to cycle through: {count}")
    if delta < 0:
        index += 1
        return 0 if index == count else index
    index -= 1
    return count - 1 if index < 0 else index


def scroll_value(value: int, delta: int, page_step: int, single_step: int) -> int:
    """New scroll bar value; a delta of 1 or -1 moves by nearly a page."""
    if delta in (1, -1):
        return value + delta * (page_step - single_step)
    return value + delta * single_step


def adjust_font_size(point_size: int, delta: int) -> Optional[int]:
    """New point size, or None when it would drop below the minimum."""
    size = point_size + delta
    return None if size < _MIN_POINT_SIZE else size


def first_tab(tab_indexes: Iterable[int], start_index: int = -1) -> Optional[int]:
    """Index of the first tab after *start_index*, else the leftmost one.

    *tab_indexes* are the positions of the tabs of one kind.
    """
    lowest: Optional[int] = None
    following: Optional[int] = None
    for idx in tab_indexes:
        if idx < (_MAX_TAB_INDEX if lowest is None else lowest):
            lowest = idx
        if idx > start_index and idx < (
            _MAX_TAB_INDEX if following is None else following
        ):
            following = idx
    return following if following is not None else lowest


def double_click_target(
    action: FileDoubleClickAction, is_main_view: Optional[bool]
) -> Optional[str]:
    """Action triggered by double clicking a file.

    *is_main_view* tells whether the file list is the revision view's;
    None means the click came from the tree view. Returns one of
    "external_editor", "external_diff", "view_diff", "view_file" or None.
    """
    action = FileDoubleClickAction(action)
    if action == FileDoubleClickAction.OPEN_IN_EDITOR:
        return "external_editor"
    if action == FileDoubleClickAction.OPEN_IN_DIFFER:
        return "external_diff" if is_main_view is not False else None
    if is_main_view is None:
        return "view_file"
    return "view_diff" if is_main_view else "view_file"


def shortcut_command(key: str) -> Optional[Shortcut]:
    """The command bound to *key*, None when the key is not bound."""
    return _SHORTCUTS.get(key)