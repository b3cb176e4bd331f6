"""Command lines for external diff viewers and editors, and start-up options."""

from __future__ import annotations

from typing import Optional, Sequence

ZERO_SHA = "0" * 40
_VIEW_FILE = "--view-file"
_VIEW_FILE_PREFIX = _VIEW_FILE + "="


def _expand(command: str, placeholders: Sequence[str], values: dict[str, str]) -> list[str]:
    for placeholder in placeholders:
        if placeholder not in command:
            command += " " + placeholder
    args = []
    for arg in command.split(" "):
        for placeholder, value in values.items():
            arg = arg.replace(placeholder, value)
        args.append(arg)
    return args


def external_diff_args(command: str, new_file: str, old_file: str) -> list[str]:
    """Arguments to run an external diff viewer.

    ``%1`` stands for the older file and ``%2`` for the newer one; any
    placeholder missing from *command* is appended. Substitution happens
    after splitting on spaces, so file names may contain spaces.
    """
    return _expand(command, ("%1", "%2"), {"%1": old_file, "%2": new_file})


def external_editor_args(command: str, path: str) -> list[str]:
    """Arguments to run an external editor on *path* (``%1`` in *command*)."""
    return _expand(command, ("%1",), {"%1": path})


def diff_copy_name(work_dir: str, sha: str, file_name: str) -> str:
    """Path of the copy of *file_name* at revision *sha* used for diffing.

    The working tree version is used in place for the uncommitted revision.
    """
    if sha == ZERO_SHA:
        return f"{work_dir}/{file_name}"
    base = file_name.rsplit("/", 1)[-1]
    return f"{work_dir}/{sha[:6]}_{base}"


def parse_view_file(args: Sequence[str]) -> Optional[str]:
    """File given by ``--view-file NAME`` or ``--view-file=NAME``; last one wins."""
    found: Optional[str] = None
    retain_next = False
    for arg in args:
        if retain_next:
            retain_next = False
            found = arg
        elif arg == _VIEW_FILE:
            retain_next = True
        elif arg.startswith(_VIEW_FILE_PREFIX):
            found = arg[len(_VIEW_FILE_PREFIX):]
    return found


def window_title(
    cur_dir: str, branch: str = "", filter_args: Optional[Sequence[str]] = None
) -> str:
    """Main window title for a repository, its branch and an active tree filter."""
    title = cur_dir
    if branch:
        title += f" [{branch}]"
    title += " - QGit"
    if filter_args is not None:
        title += " - FILTER ON < " + " ".join(filter_args) + " >"
    return title