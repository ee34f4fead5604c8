"""Tests for splitting a tag sequence into frames."""

from swf_timeline.datatypes import Bounds
from swf_timeline.movie import split_frames
from swf_timeline.tags import (
    Action,
    Background,
    DefineShape,
    DoAction,
    FrameLabel,
    Place,
    Remove,
    ShowFrame,
    UnknownTag,
)


def test_empty_sequence_has_no_frames():
    assert split_frames([]) == []


def test_sequence_without_show_frame_has_no_frames():
    """Content that is never rendered does not form a frame."""
    tags = [DefineShape(1, Bounds(0, 0, 1, 1)), Place(layer=1, identifier=1)]

    assert split_frames(tags) == []


def test_frames_are_numbered_from_one():
    frames = split_frames([ShowFrame(), ShowFrame(), ShowFrame()])

    assert [frame.number for frame in frames] == [1, 2, 3]
    assert all(frame.is_empty() for frame in frames)


def test_tags_are_grouped_by_role():
    shape = DefineShape(1, Bounds(0, 0, 10, 10))
    tags = [
        Background((255, 255, 255)),
        shape,
        FrameLabel("start"),
        DoAction([Action("play")]),
        Place(layer=1, identifier=1),
        ShowFrame(),
        Place(layer=1, x=50),
        ShowFrame(),
    ]

    first, second = split_frames(tags)

    assert first.definitions == [shape]
    assert first.commands == [Background((255, 255, 255)), Place(layer=1, identifier=1)]
    assert first.actions == [Action("play")]
    assert first.label == "start"
    assert second.commands == [Place(layer=1, x=50)]
    assert second.label is None
    assert second.actions == []


def test_last_label_and_actions_win():
    tags = [
        FrameLabel("first"),
        DoAction([Action("play")]),
        FrameLabel("second"),
        DoAction([Action("stop")]),
        ShowFrame(),
    ]

    (frame,) = split_frames(tags)

    assert frame.label == "second"
    assert frame.actions == [Action("stop")]


def test_trailing_content_is_discarded():
    tags = [Place(layer=1, identifier=1), ShowFrame(), Remove(layer=1)]

    frames = split_frames(tags)

    assert len(frames) == 1
    assert frames[0].commands == [Place(layer=1, identifier=1)]


def test_unknown_and_foreign_values_become_commands():
    """Anything that is not a marker or definition is kept as a command."""
    unknown = UnknownTag("DefineVideo", {"identifier": 3})
    marker = "not a tag"

    (frame,) = split_frames([unknown, marker, ShowFrame()])

    assert frame.commands == [unknown, marker]


def test_none_entries_are_skipped():
    (frame,) = split_frames([None, Remove(layer=2), None, ShowFrame()])

    assert frame.commands == [Remove(layer=2)]


def test_split_accepts_any_iterable():
    frames = split_frames(tag for tag in [ShowFrame(), ShowFrame()])

    assert len(frames) == 2


def test_malformed_action_bundles_do_not_fail():
    """None actions are dropped and a missing action list counts as empty."""
    with_none, missing = split_frames(
        [
            DoAction([Action("play"), None]),
            ShowFrame(),
            DoAction(actions=None),
            ShowFrame(),
        ]
    )

    assert with_none.actions == [Action("play")]
    assert missing.actions == []
