"""Reference names attached to revisions and their on-screen labels."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import Callable, Iterable, Iterator, Mapping, Optional

_TEXT_SPACING = 4
_MARK_SPACING = 2


class RefType(IntFlag):
    NONE = 0
    TAG = 1
    BRANCH = 2
    RMT_BRANCH = 4
    CUR_BRANCH = 8
    REF = 16
    APPLIED = 32
    UN_APPLIED = 64
    ANY_REF = 127


_LABEL_ORDER = (RefType.BRANCH, RefType.RMT_BRANCH, RefType.TAG, RefType.REF)

_PREFIXES = {
    RefType.BRANCH: "",
    RefType.TAG: "tags/",
    RefType.RMT_BRANCH: "remotes/",
    RefType.REF: "bases/",
}


@dataclass(frozen=True)
class RefLabel:
    """One ref name shown next to a revision; NONE type means detached HEAD."""

    name: str
    ref_type: RefType
    is_current: bool = False

    @property
    def text(self) -> str:
        return "detached" if self.ref_type == RefType.NONE else self.name


def ref_type_from_name(name: str) -> RefType:
    if name.startswith("tags/"):
        return RefType.TAG
    if name.startswith("remotes/"):
        return RefType.RMT_BRANCH
    if name:
        return RefType.BRANCH
    return RefType.NONE


def qualified_ref_name(name: str, ref_type: RefType) -> str:
    """Fully qualified ref name, or '' for a type without a name."""
    prefix = _PREFIXES.get(ref_type)
    return "" if prefix is None else prefix + name


def iter_ref_labels(
    ref_types: RefType,
    names_by_type: Mapping[RefType, Iterable[str]],
    current_branch: str,
) -> Iterator[RefLabel]:
    """Yield labels: detached first, then local, remote, tags, other refs."""
    if not ref_types:
        return
    if ref_types & RefType.CUR_BRANCH and not current_branch:
        yield RefLabel("", RefType.NONE, True)
    for ref_type in _LABEL_ORDER:
        for name in names_by_type.get(ref_type, ()):
            yield RefLabel(name, ref_type, name == current_branch)


def tag_mark_style(ref_type: RefType, is_current: bool) -> tuple[Optional[str], bool]:
    """Return (background colour name, bold) for a ref label."""
    colors = {
        RefType.NONE: "red",
        RefType.BRANCH: "green" if is_current else "dark_green",
        RefType.RMT_BRANCH: "light_orange",
        RefType.TAG: "yellow",
        RefType.REF: "purple",
    }
    return colors.get(ref_type), is_current


def ref_name_at(
    labels: Iterable[RefLabel],
    x: int,
    text_width: Callable[[RefLabel], int],
    start: int,
) -> str:
    """Qualified name of the label drawn under horizontal position *x*.

    Labels are laid out from *start*; *text_width* gives the width of a
    label's text. Returns '' when *x* lies past the last label.
    """
    offset = start
    for label in labels:
        offset += text_width(label) + 2 * _TEXT_SPACING
        if x <= offset:
            return qualified_ref_name(label.name, label.ref_type)
        offset += _MARK_SPACING
    return ""