"""Recently opened repositories, ref submenus and custom action commands."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Union

_RECENT_TAG = "RECENT"
_CMD_LINE_TOKEN = " %lineedit:cmdline args%"

MenuEntry = Union[str, tuple[str, list]]


def update_recent_repos(
    recents: Sequence[str], new_entry: str, limit: int
) -> list[str]:
    """Recent repository list with *new_entry* moved to the front.

    An empty *new_entry* leaves the order unchanged. At most *limit*
    entries are kept.
    """
    if limit < 1:
        raise ValueError(f"recent repository limit must be positive: {limit}")
    entries = list(recents)
    if new_entry in entries:
        entries.remove(new_entry)
    if new_entry:
        entries.insert(0, new_entry)
    return entries[:limit]


def recent_menu_entries(recents: Iterable[str]) -> list[tuple[str, str]]:
    """(menu text, action data) for each recent repository, numbered from 1."""
    return [
        (f"{number} {path}", f"{_RECENT_TAG} {path}")
        for number, path in enumerate(recents, start=1)
    ]


def parse_recent_entry(data: str) -> Optional[str]:
    """Repository path held by a recent-repository action's data, if any."""
    if not data.startswith(_RECENT_TAG):
        return None
    path = data[len(_RECENT_TAG) + 1:]
    return path or None


def ref_submenu_tree(refs: Iterable[str], sep: str = "/") -> list[MenuEntry]:
    """Nest ref names into submenus by their path components.

    The result is a menu: a list whose items are either a ref name (an
    action) or a (submenu name, menu) pair. Every component but the last
    becomes a submenu; the full ref name is placed in the deepest one.
    Submenus and actions keep the order in which they first appear.
    """
    root: list[MenuEntry] = []
    for ref in refs:
        parts = [part for part in ref.split(sep) if part]
        menu = root
        for part in parts[:-1]:
            menu = _submenu(menu, part)
        menu.append(ref)
    return root


def _submenu(menu: list[MenuEntry], name: str) -> list[MenuEntry]:
    for entry in menu:
        if isinstance(entry, tuple) and entry[0] == name:
            return entry[1]
    child: list[MenuEntry] = []
    menu.append((name, child))
    return child


def custom_action_command(command: str, cmd_line_flag: bool) -> str:
    """The stored command of a custom action, ready for variable expansion.

    With *cmd_line_flag* set, a line-edit prompt for extra arguments is
    inserted at the end of the first line.
    """
    cmd = command.strip()
    if cmd_line_flag:
        pos = cmd.find("\n")
        if pos < 0:
            pos = len(cmd)
        cmd = cmd[:pos] + _CMD_LINE_TOKEN + cmd[pos:]
    return cmd