from revgraph.gitcmds import (
    branch_or_tag_command,
    checkout_command,
    checkout_names,
    delete_ref_commands,
    group_ref,
    group_refs,
    move_ref_command,
    rebase_commands,
    strip_names,
)


def test_rebase_branch():
    assert rebase_commands("", "topic", "main") == [
        "git checkout -q topic",
        "git rebase main",
    ]


def test_rebase_range():
    assert rebase_commands("s1", "s2", "base") == ["git rebase --onto base s1^ s2"]


def test_move_remote_branch():
    cmd = move_ref_command("remotes/origin/feat/x", "abc", "main")
    assert cmd == "git push -q origin abc:feat/x"


def test_move_tag():
    assert move_ref_command("tags/v1", "abc", "main") == "git tag -f v1 abc"


def test_move_current_and_other_branch():
    assert move_ref_command("main", "abc", "main") == "git checkout -q -B main abc"
    assert move_ref_command("dev", "abc", "main") == "git branch -f dev abc"


def test_move_empty_target():
    assert move_ref_command("", "abc", "main") is None


def test_branch_command():
    assert branch_or_tag_command("dev", "abc", False) == "git branch dev abc"
    assert branch_or_tag_command("dev", "abc", False, force=True) == "git branch -f dev abc"


def test_tag_command_with_message():
    cmd = branch_or_tag_command("v1", "abc", True, "release", True)
    assert cmd == 'git tag -m "release" -f v1 abc'


def test_checkout_commands():
    assert checkout_command("abc") == "git checkout -q  abc"
    assert checkout_command("abc", "dev") == "git checkout -q -b dev abc"
    assert checkout_command("abc", "dev", True) == "git checkout -q -B dev abc"


def test_checkout_names():
    names = checkout_names(["main"], ["origin/feat/x", "bare"])
    assert names == ["main", "feat/x"]


def test_group_ref_does_not_mutate():
    groups = {}
    result = group_ref("tags/v1", groups)
    assert groups == {}
    assert result == {"tags/": ["v1"]}
    result = group_ref("tags/v2", result)
    assert result["tags/"] == ["v1", "v2"]


def test_group_refs_ordered_by_key():
    groups = group_refs(["tags/v1", "remotes/origin/x", "main"])
    assert list(groups) == sorted(groups)
    assert groups[""] == ["main"]
    assert groups["origin"] == ["x"]


def test_strip_names():
    assert strip_names(["origin/main", "v1", "a/b/c"]) == ["main", "v1", "c"]


def test_delete_ref_commands():
    cmds = delete_ref_commands(
        ["main", "dev", "tags/v1", "remotes/origin/a", "remotes/origin/b"]
    )
    assert cmds == [
        "git branch -D main dev",
        "git push -q origin :a :b",
        "git tag -d v1",
    ]


def test_delete_nothing():
    assert delete_ref_commands([]) == []