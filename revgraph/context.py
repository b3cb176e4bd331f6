"""Which actions are enabled for the current selection, and context menu contents."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Collection

from .extcmd import ZERO_SHA
from .tabs import TabKind

SEPARATOR = "-"


@dataclass(frozen=True)
class ActionState:
    """Enabled state of actions that depend on the selected revision and file."""

    view_file: bool = False
    external_diff: bool = False
    external_editor: bool = False
    save_file: bool = False
    filter_tree: bool = False
    mark_diff_to_sha: bool = False
    checkout: bool = False
    branch: bool = False
    tag: bool = False
    delete: bool = False
    push: bool = False
    pop: bool = False

    def enabled_names(self) -> set[str]:
        """Names of the enabled actions."""
        return {f.name for f in fields(self) if getattr(self, f.name)}


def context_actions(
    rev_sha: str,
    file_name: str,
    is_dir: bool,
    found: bool,
    is_unapplied: bool = False,
    is_applied: bool = False,
    ref_type: int = 0,
    nothing_to_commit: bool = True,
    filter_checked: bool = False,
) -> ActionState:
    """Action states for revision *rev_sha* and path *file_name*.

    Revision details (*is_unapplied*, *is_applied*, *ref_type*) count only
    when the revision was *found*.
    """
    path_enabled = bool(file_name)
    file_enabled = path_enabled and not is_dir
    if not found:
        is_unapplied = is_applied = False
        ref_type = 0
    committed = rev_sha != ZERO_SHA
    rev_ok = found and committed and not is_unapplied
    return ActionState(
        view_file=file_enabled,
        external_diff=file_enabled,
        external_editor=file_enabled,
        save_file=file_enabled,
        filter_tree=path_enabled or filter_checked,
        mark_diff_to_sha=committed,
        checkout=rev_ok,
        branch=rev_ok,
        tag=rev_ok,
        delete=ref_type != 0,
        push=found and is_unapplied and nothing_to_commit,
        pop=found and is_applied and nothing_to_commit,
    )


def rev_context_menu(tab: TabKind, enabled: Collection[str], sha: str) -> list[str]:
    """Entries of the popup menu of a revision row.

    *enabled* holds the names of enabled actions. Entries are action
    names, SEPARATOR, and "branches", "remote_branches" and "tags" for
    the ref submenus shown on the revision tab.
    """
    menu: list[str] = []

    def add(name: str, condition: bool = True) -> None:
        if condition and name in enabled:
            menu.append(name)

    add("view_rev", tab == TabKind.FILE)
    add("view_diff", tab != TabKind.PATCH)
    add("view_diff_new_tab", tab == TabKind.REV)
    add("external_diff", tab != TabKind.FILE)
    add("external_editor", tab == TabKind.FILE)

    if tab == TabKind.REV:
        add("commit", sha == ZERO_SHA)
        for name in ("checkout", "branch", "tag", "delete",
                     "mail_format_patch", "push", "pop"):
            add(name)
        menu.extend([SEPARATOR, "branches", "remote_branches", SEPARATOR, "tags"])
    return menu


def file_context_menu(
    tab: TabKind, enabled: Collection[str], is_dir: bool, is_file_popup: bool
) -> list[str]:
    """Entries of the popup menu of a file or tree item; each action appears once."""
    menu: list[str] = []

    def add(name: str, condition: bool = True) -> None:
        if condition and name in enabled and name not in menu:
            menu.append(name)

    add("view_diff", is_file_popup and tab != TabKind.PATCH)
    add("view_file", not is_dir)
    add("view_file_new_tab", not is_dir)
    add("view_rev", tab != TabKind.REV and is_file_popup)
    add("filter_tree")
    if not is_dir:
        add("save_file")
        add("external_diff", is_file_popup)
        add("external_editor", is_file_popup)
        add("external_editor")
    return menu