"""Filtering and highlighting of history rows by text, author or sha."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Mapping, Optional


class FilterColumn(Enum):
    """What a row filter compares its pattern against."""

    LOG = "log"
    AUTHOR = "author"
    LOG_MSG = "log_msg"
    COMMIT = "commit"
    SHA_MAP = "sha_map"
    EXTERNAL = "external"


@dataclass(frozen=True)
class RevText:
    """The searchable text of one revision."""

    short_log: str = ""
    author: str = ""
    long_log: str = ""


def wildcard_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile a shell-style wildcard into an unanchored, case-insensitive regex.

    ``*`` matches any run of characters, ``?`` any single character and
    ``[...]`` a character class, ``[!...]`` its negation. An unclosed
    ``[`` is taken literally.
    """
    out: list[str] = []
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        if c == "*":
            out.append(".*")
        elif c == "?":
            out.append(".")
        elif c == "[":
            j = i + 1
            if j < n and pattern[j] in "!^":
                j += 1
            if j < n and pattern[j] == "]":
                j += 1
            end = pattern.find("]", j)
            if end == -1:
                out.append(re.escape(c))
            else:
                body = pattern[i + 1 : end]
                negate = body[:1] in ("!", "^")
                if negate:
                    body = body[1:]
                body = body.replace("\\", "\\\\")
                out.append(f"[{'^' if negate else ''}{body}]")
                i = end
        else:
            out.append(re.escape(c))
        i += 1
    return re.compile("".join(out), re.IGNORECASE)


class RowFilter:
    """Decides which history rows match, are shown or are highlighted.

    *external* is consulted for the EXTERNAL column and receives the sha.
    """

    def __init__(self, external: Optional[Callable[[str], bool]] = None) -> None:
        self._external = external
        self._regex = wildcard_to_regex("")
        self._column = FilterColumn.LOG
        self._sha_set: frozenset[str] = frozenset()
        self._highlight = False
        self._is_on = False

    @property
    def is_filtering(self) -> bool:
        """True when non-matching rows are hidden."""
        return self._is_on and not self._highlight

    @property
    def is_highlighting(self) -> bool:
        return self._highlight

    def set_filter(
        self,
        is_on: bool,
        highlight: bool,
        pattern: str = "",
        column: FilterColumn = FilterColumn.EXTERNAL,
        sha_set: Optional[Iterable[str]] = None,
    ) -> None:
        """Configure the filter; a None *sha_set* keeps the previous one."""
        self._regex = wildcard_to_regex(pattern)
        self._column = FilterColumn(column)
        if sha_set is not None:
            self._sha_set = frozenset(sha_set)
        self._highlight = highlight and is_on
        self._is_on = is_on

    def is_match(self, sha: str, rev: Optional[RevText]) -> bool:
        column = self._column
        if column == FilterColumn.SHA_MAP:
            return sha in self._sha_set
        if column == FilterColumn.EXTERNAL:
            return bool(self._external and self._external(sha))
        if rev is None:
            return False
        targets = {
            FilterColumn.LOG: rev.short_log,
            FilterColumn.AUTHOR: rev.author,
            FilterColumn.LOG_MSG: rev.long_log,
            FilterColumn.COMMIT: sha,
        }
        return self._regex.search(targets.get(column, "")) is not None

    def is_highlighted(self, sha: str, rev: Optional[RevText]) -> bool:
        return self._highlight and self.is_match(sha, rev)

    def accepts(self, sha: str, rev: Optional[RevText]) -> bool:
        return self._highlight or self.is_match(sha, rev)

    def filter_rows(
        self, shas: Iterable[str], revs: Mapping[str, RevText]
    ) -> list[str]:
        """The shas left visible, in order; all of them unless filtering."""
        shas = list(shas)
        if not self.is_filtering:
            return shas
        return [sha for sha in shas if self.accepts(sha, revs.get(sha))]