import pytest

from revgraph.refs import (
    RefLabel,
    RefType,
    iter_ref_labels,
    qualified_ref_name,
    ref_name_at,
    ref_type_from_name,
    tag_mark_style,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("tags/v1.0", RefType.TAG),
        ("remotes/origin/main", RefType.RMT_BRANCH),
        ("main", RefType.BRANCH),
        ("", RefType.NONE),
    ],
)
def test_ref_type_from_name(name, expected):
    assert ref_type_from_name(name) == expected


@pytest.mark.parametrize("ref_type", [RefType.TAG, RefType.RMT_BRANCH, RefType.BRANCH])
def test_qualified_name_round_trip(ref_type):
    qualified = qualified_ref_name("topic", ref_type)
    assert ref_type_from_name(qualified) == ref_type
    assert qualified.endswith("topic")


def test_qualified_name_prefixes():
    assert qualified_ref_name("x", RefType.TAG) == "tags/x"
    assert qualified_ref_name("x", RefType.REF) == "bases/x"
    assert qualified_ref_name("x", RefType.NONE) == ""


def test_no_refs_no_labels():
    assert list(iter_ref_labels(RefType.NONE, {RefType.BRANCH: ["main"]}, "main")) == []


def test_label_order_and_current():
    names = {
        RefType.TAG: ["v1"],
        RefType.REF: ["stgit"],
        RefType.RMT_BRANCH: ["origin/main"],
        RefType.BRANCH: ["dev", "main"],
    }
    labels = list(iter_ref_labels(RefType.BRANCH | RefType.TAG, names, "main"))
    assert [label.name for label in labels] == ["dev", "main", "origin/main", "v1", "stgit"]
    assert [label.is_current for label in labels] == [False, True, False, False, False]


def test_detached_label_comes_first():
    names = {RefType.TAG: ["v1"]}
    labels = list(iter_ref_labels(RefType.CUR_BRANCH | RefType.TAG, names, ""))
    assert labels[0] == RefLabel("", RefType.NONE, True)
    assert labels[0].text == "detached"
    assert labels[1].text == "v1"


def test_tag_mark_style():
    assert tag_mark_style(RefType.NONE, False) == ("red", False)
    assert tag_mark_style(RefType.TAG, False) == ("yellow", False)
    assert tag_mark_style(RefType.BRANCH, True) == ("green", True)
    assert tag_mark_style(RefType.BRANCH, False)[0] != "green"


def test_ref_name_at():
    labels = [
        RefLabel("main", RefType.BRANCH),
        RefLabel("v1", RefType.TAG),
        RefLabel("origin/main", RefType.RMT_BRANCH),
    ]

    def width(label):
        return 10

    assert ref_name_at(labels, 0, width, 0) == "main"
    assert ref_name_at(labels, 18, width, 0) == "main"
    assert ref_name_at(labels, 21, width, 0) == "tags/v1"
    assert ref_name_at(labels, 45, width, 0) == "remotes/origin/main"
    assert ref_name_at(labels, 1000, width, 0) == ""


def test_ref_name_at_respects_start():
    labels = [RefLabel("main", RefType.BRANCH)]
    assert ref_name_at(labels, 5, lambda label: 0, 100) == "main"
    assert ref_name_at([], 5, lambda label: 0, 0) == ""