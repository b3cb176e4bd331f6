"""Splitting of command lines into argument lists."""

from __future__ import annotations

_SEPARATORS = "#%&!?"


def split_arg_list(cmd: str, quote_char: str) -> list[str]:
    """Split *cmd* into arguments, keeping quoted sections together.

    Double quotes, single quotes and *quote_char* delimit sections whose
    spaces are preserved. *quote_char* is removed everywhere; arguments
    wholly wrapped in double or single quotes lose the wrapping quotes.
    """
    if not any(q in cmd for q in (quote_char, '"', "'")):
        return [part for part in cmd.split(" ") if part]

    sep = next((c for c in _SEPARATORS if c not in cmd), None)
    if sep is None:
        raise ValueError("no unique separator found in command line")

    new_cmd = _restore_spaces(cmd.replace(" ", sep), sep, quote_char)
    new_cmd = new_cmd.replace(quote_char, "")

    args = [part for part in new_cmd.split(sep) if part]
    return [_unwrap(arg) for arg in args]


def _unwrap(arg: str) -> str:
    for q in ('"', "'"):
        if arg.startswith(q) and arg.endswith(q):
            return arg[1:-1]
    return arg


def _restore_spaces(text: str, sep: str, quote_char: str) -> str:
    quotes = (quote_char[:1], '"', "'")
    out = []
    active_quote = None
    for c in text:
        if active_quote is None:
            if c in quotes and text.count(c) % 2 == 0:
                active_quote = c
            out.append(c)
        elif c == active_quote:
            active_quote = None
            out.append(c)
        else:
            out.append(" " if c == sep else c)
    return "".join(out)


def is_error_exit(
    crashed: bool, exit_code: int, error_output: str, canceling: bool
) -> bool:
    """Decide whether a finished command failed.

    A non-zero exit code alone is not trusted: it counts as failure only
    when the command also wrote to its error stream.
    """
    return bool(crashed or (exit_code and error_output) or canceling)