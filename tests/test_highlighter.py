import pytest

from app.models.comparison import ComparisonResult, Difference
from app.ui.highlighter import Segment, build_segments, order_by_position, relevant_differences
from app.ui.state import Slot
from tests.fakes import SAMPLE_ANALYSIS


def diff(type_, content, significance="why"):
    return Difference(type=type_, content=content, location="", significance=significance)


def highlighted(segments):
    return [(s.text, s.css_class) for s in segments if s.highlighted]


def test_sides_pick_their_types():
    diffs = [diff("deletion", "a"), diff("addition", "b"), diff("modification", "c")]
    assert [d.content for d in relevant_differences(diffs, Slot.DOC1)] == ["a"]
    assert [d.content for d in relevant_differences(diffs, Slot.DOC2)] == ["b", "c"]


def test_cat_dog_scenario():
    result = ComparisonResult.model_validate(SAMPLE_ANALYSIS)

    left = build_segments("The cat sat.", result.differences, Slot.DOC1)
    assert left == [
        Segment("The "),
        Segment("cat", result.differences[0]),
        Segment(" sat."),
    ]
    assert highlighted(left) == [("cat", "hl-deletion")]

    right = build_segments("The dog sat happily.", result.differences, Slot.DOC2)
    assert highlighted(right) == [("dog", "hl-addition"), ("happily", "hl-modification")]
    assert [s.text for s in right if not s.highlighted] == ["The ", " sat ", "."]


def test_tooltip_is_significance():
    segments = build_segments("x added y", [diff("addition", "added", "It matters.")], Slot.DOC2)
    assert segments[1].tooltip == "It matters."
    assert segments[0].tooltip == ""


@pytest.mark.parametrize(
    "text,contents",
    [
        ("alpha beta gamma", ["gamma", "alpha"]),
        ("alpha beta gamma", ["missing", "beta"]),
        ("line one\nline two\n", ["line two\n"]),
        ("whole", ["whole"]),
        ("", ["anything"]),
        ("abc", []),
    ],
)
def test_segments_reassemble_original(text, contents):
    segments = build_segments(text, [diff("addition", c) for c in contents], Slot.DOC2)
    assert "".join(s.text for s in segments) == text


def test_out_of_order_differences_are_sorted():
    text = "first second third"
    segments = build_segments(text, [diff("addition", "third"), diff("addition", "first")], Slot.DOC2)
    assert [s.text for s in segments if s.highlighted] == ["first", "third"]


def test_missing_content_is_skipped():
    segments = build_segments("The dog sat.", [diff("addition", "horse"), diff("addition", "dog")], Slot.DOC2)
    assert highlighted(segments) == [("dog", "hl-addition")]


def test_not_found_sorts_last_and_keeps_order():
    diffs = [diff("addition", "zz"), diff("addition", "b"), diff("addition", "yy"), diff("addition", "a")]
    ordered = order_by_position("a b", diffs)
    assert [d.content for d in ordered] == ["a", "b", "zz", "yy"]


def test_empty_content_is_ignored():
    segments = build_segments("abc", [diff("addition", "")], Slot.DOC2)
    assert segments == [Segment("abc")]


def test_repeated_substring_anchors_after_cursor():
    # both differences have the same first occurrence; the second anchors after the first
    text = "sat and sat"
    segments = build_segments(text, [diff("addition", "sat"), diff("addition", "sat")], Slot.DOC2)
    assert [s.text for s in segments] == ["sat", " and ", "sat"]


def test_overlapping_differences_skip_the_later_one():
    segments = build_segments("abcdef", [diff("addition", "abcd"), diff("addition", "cd")], Slot.DOC2)
    assert highlighted(segments) == [("abcd", "hl-addition")]
    assert "".join(s.text for s in segments) == "abcdef"
