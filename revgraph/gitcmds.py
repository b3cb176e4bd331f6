"""Git command lines for rebasing, moving, creating and deleting references."""

from __future__ import annotations

from typing import Iterable, Mapping, Optional, Sequence


def rebase_commands(from_sha: str, to: str, onto: str) -> list[str]:
    """Commands that rebase a branch, or the range *from_sha*..*to*, onto *onto*."""
    if not from_sha:
        return [f"git checkout -q {to}", f"git rebase {onto}"]
    return [f"git rebase --onto {onto} {from_sha}^ {to}"]


def move_ref_command(target: str, to_sha: str, current_branch: str) -> Optional[str]:
    """Command that points ref *target* at *to_sha*; None for an empty target."""
    if target.startswith("remotes/"):
        parts = target.split("/", 2)
        remote = parts[1]
        name = parts[2] if len(parts) > 2 else ""
        return f"git push -q {remote} {to_sha}:{name}"
    if target.startswith("tags/"):
        return f"git tag -f {target.split('/', 1)[1]} {to_sha}"
    if not target:
        return None
    if target == current_branch:
        return f"git checkout -q -B {target} {to_sha}"
    return f"git branch -f {target} {to_sha}"


def branch_or_tag_command(
    ref: str, sha: str, is_tag: bool, message: str = "", force: bool = False
) -> str:
    """Command creating branch or tag *ref* at *sha*."""
    if is_tag:
        cmd = "git tag "
        if message:
            cmd += f'-m "{message}" '
    else:
        cmd = "git branch "
    if force:
        cmd += "-f "
    return cmd + f"{ref} {sha}"


def checkout_command(rev: str, branch: str = "", reset: bool = False) -> str:
    """Command checking out *rev*, creating or resetting *branch* when given."""
    cmd = "git checkout -q "
    if branch:
        cmd += ("-B " if reset else "-b ") + branch
    return f"{cmd} {rev}"


def checkout_names(
    local_branches: Iterable[str], remote_branches: Iterable[str]
) -> list[str]:
    """Local branch names plus remote ones without their remote prefix."""
    names = list(local_branches)
    names.extend(
        name.split("/", 1)[1] for name in remote_branches if "/" in name
    )
    return names


def _split_ref(ref: str) -> tuple[str, str]:
    if ref.startswith("tags/"):
        return "tags/", ref[5:]
    if ref.startswith("remotes/"):
        parts = ref.split("/", 2)
        return parts[1], parts[2] if len(parts) > 2 else ""
    return "", ref


def group_ref(ref: str, groups: Mapping[str, Sequence[str]]) -> dict[str, list[str]]:
    """A copy of *groups* with *ref* added to its group.

    Local branches group under "", tags under "tags/" and remote branches
    under the remote's name.
    """
    group, name = _split_ref(ref)
    result = {key: list(value) for key, value in groups.items()}
    result.setdefault(group, []).append(name)
    return result


def group_refs(refs: Iterable[str]) -> dict[str, list[str]]:
    """Refs grouped as by group_ref(), with groups ordered by key."""
    groups: dict[str, list[str]] = {}
    for ref in refs:
        group, name = _split_ref(ref)
        groups.setdefault(group, []).append(name)
    return dict(sorted(groups.items()))


def strip_names(names: Iterable[str]) -> list[str]:
    """The last path component of each name."""
    return [name.rsplit("/", 1)[-1] for name in names]


def delete_ref_commands(refs: Iterable[str]) -> list[str]:
    """Commands deleting the given qualified refs, one per group."""
    commands = []
    for group, names in group_refs(refs).items():
        if group == "":
            commands.append("git branch -D " + " ".join(names))
        elif group == "tags/":
            commands.append("git tag -d " + " ".join(names))
        else:
            commands.append(f"git push -q {group} :" + " :".join(names))
    return commands