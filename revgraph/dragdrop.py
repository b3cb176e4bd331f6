"""Drag-and-drop of revisions between history views."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Optional, Sequence, Union

from .refs import RefType, ref_type_from_name

MIME_TYPE = "application/x-qgit-revs"
ZERO_SHA = "0" * 40

_COPY, _MOVE, _LINK = 1, 2, 4


class DropFlag(IntFlag):
    NONE = 0
    PATCHES = 1 << 0
    REV_LIST = 1 << 1
    REV_RANGE = 1 << 2
    SAME_REPO = 1 << 3


class DropAction(IntEnum):
    PATCH = _COPY
    REBASE = _MOVE
    MOVE_REF = (_LINK << 1) | _MOVE
    MERGE = _LINK


_ACTION_NAMES = {
    DropAction.PATCH: "patching",
    DropAction.REBASE: "rebasing",
    DropAction.MOVE_REF: "moving",
    DropAction.MERGE: "merging",
}

_MODIFIER_ACTIONS = {
    "ctrl": DropAction.PATCH,
    "shift": DropAction.REBASE,
    "alt": DropAction.MERGE,
}


@dataclass(frozen=True)
class RevsPayload:
    """Revisions carried by a drag, as encoded by encode_revs()."""

    contiguous: bool
    repo: str
    shas: list[str]
    ref_name: str = ""


@dataclass
class DropInfo:
    """What is being dropped and, once decided, how."""

    flags: DropFlag
    source_repo: str = ""
    source_ref: str = ""
    shas: list[str] = field(default_factory=list)
    action: Optional[DropAction] = None

    @property
    def source_ref_type(self) -> RefType:
        return ref_type_from_name(self.source_ref)


@dataclass(frozen=True)
class DropDecision:
    """Outcome of hovering a drop over a row."""

    accepted: bool
    action: Optional[DropAction]
    status: str

    @property
    def drop_action(self) -> int:
        """The plain copy/move/link bits of the action."""
        return 0 if self.action is None else int(self.action) & 0x7


def action_name(action: DropAction) -> str:
    return _ACTION_NAMES.get(action, "This should not happen.")


def drag_text(shas: Sequence[str], contiguous: bool, ref_name: str) -> Optional[str]:
    """Plain-text range description of a drag, None for a non-contiguous list."""
    if not contiguous or not shas:
        return None
    text = f"{shas[-1]}.." if len(shas) > 1 else ""
    return text + (ref_name or shas[0])


def encode_revs(
    shas: Sequence[str], contiguous: bool, repo: str, ref_name: str
) -> bytes:
    """Encode dragged revisions, newest first, for the revisions mime type."""
    if not shas:
        raise ValueError("no revisions to encode")
    entries = list(shas)
    if contiguous and ref_name:
        entries[0] = f"{entries[0]} {ref_name}"
    header = f"{'RANGE' if contiguous else 'LIST'}@{repo}\n"
    return (header + "\n".join(entries)).encode("utf-8")


def parse_revs(data: Union[bytes, str]) -> RevsPayload:
    """Decode data produced by encode_revs()."""
    text = data.decode("utf-8") if isinstance(data, bytes) else data
    header, _, body = text.partition("\n")
    entries = [line for line in body.split("\n") if line]
    if not entries:
        raise ValueError("no revisions in drag data")
    first_sha, _, ref_name = entries[0].partition(" ")
    entries[0] = first_sha
    _, _, repo = header.partition("@")
    return RevsPayload(header.startswith("RANGE"), repo, entries, ref_name)


def evaluate_drop(
    info: DropInfo,
    target_ref: str,
    target_sha: str,
    on_log_column: bool,
    modifier: Optional[str] = None,
) -> DropDecision:
    """Choose the drop action over a target row and describe it.

    *modifier* is "ctrl", "shift", "alt" or None. The chosen action is
    also stored in ``info.action``.
    """
    target_type = ref_type_from_name(target_ref)
    accepted = int(DropAction.PATCH)
    default = DropAction.PATCH

    if (
        info.flags & DropFlag.SAME_REPO
        and info.flags & DropFlag.REV_LIST
        and on_log_column
    ):
        if target_sha in info.shas:
            return DropDecision(False, None, "Cannot drop onto current selection.")
        if info.flags & DropFlag.REV_RANGE:
            accepted |= DropAction.REBASE
            default = DropAction.REBASE
        if target_type == RefType.BRANCH:
            accepted |= DropAction.MERGE
            default = DropAction.MERGE
        if (
            len(info.shas) == 1
            and info.source_ref_type != RefType.NONE
            and target_sha != ZERO_SHA
        ):
            accepted |= DropAction.MOVE_REF
            default = DropAction.MOVE_REF

    action = _MODIFIER_ACTIONS.get(modifier or "", default)
    status = ""
    if not action & accepted:
        name = action_name(action)
        status = name[:1].upper() + name[1:] + " not allowed. "
        action = default

    if action == DropAction.PATCH:
        status += "Applying patches"
    elif action == DropAction.REBASE:
        source = (
            info.source_ref
            if info.source_ref_type == RefType.BRANCH and len(info.shas) == 1
            else "selection"
        )
        onto = target_ref if target_type == RefType.BRANCH else target_sha
        status += f"Rebasing {source} onto {onto}"
    elif action == DropAction.MOVE_REF:
        status += "Moving " + info.source_ref
    elif action == DropAction.MERGE:
        status += "Merging selected branches into " + target_ref

    info.action = action
    return DropDecision(True, action, status)