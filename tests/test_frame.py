"""Tests for Frame."""

import pytest

from swf_timeline.datatypes import Bounds
from swf_timeline.errors import InvalidArgumentError
from swf_timeline.movie import Frame, flatten_frames, split_frames
from swf_timeline.tags import (
    Action,
    DefineShape,
    DoAction,
    FrameLabel,
    Place,
    Remove,
    ShowFrame,
)

SHAPE = DefineShape(1, Bounds(0, 0, 100, 100))
PLACE = Place(layer=1, identifier=1, x=20, y=20)


def make_frame() -> Frame:
    frame = Frame()
    frame.label = "intro"
    frame.add_definition(SHAPE)
    frame.add_command(PLACE)
    frame.add_action(Action("stop"))
    return frame


def test_new_frame_is_empty():
    """A new frame has no number, no label and empty lists."""
    frame = Frame()

    assert frame.number == 0
    assert frame.label is None
    assert frame.definitions == []
    assert frame.commands == []
    assert frame.actions == []
    assert frame.is_empty()


def test_frame_number_can_be_given():
    assert Frame(5).number == 5


@pytest.mark.parametrize("attribute", ["definitions", "commands", "actions"])
def test_setting_list_to_none_is_rejected(attribute):
    frame = Frame()

    with pytest.raises(InvalidArgumentError):
        setattr(frame, attribute, None)

    assert getattr(frame, attribute) == []


@pytest.mark.parametrize("method", ["add_definition", "add_command", "add_action"])
def test_adding_none_is_rejected(method):
    frame = Frame()

    with pytest.raises(ValueError):
        getattr(frame, method)(None)


def test_setting_list_containing_none_is_rejected():
    with pytest.raises(InvalidArgumentError):
        Frame().commands = [PLACE, None]


def test_list_setter_copies_the_sequence():
    """The frame owns its lists; later changes to the source do not leak in."""
    source = [PLACE]
    frame = Frame()
    frame.commands = source

    source.append(Remove(layer=1))

    assert frame.commands == [PLACE]


def test_add_to_timeline_order():
    """Definitions, label, actions, commands, then ShowFrame."""
    tags: list = []

    make_frame().add_to_timeline(tags)

    assert tags == [
        SHAPE,
        FrameLabel("intro"),
        DoAction([Action("stop")]),
        PLACE,
        ShowFrame(),
    ]


def test_add_to_timeline_skips_empty_label_and_actions():
    frame = Frame()
    frame.label = ""
    frame.add_command(PLACE)
    tags: list = []

    frame.add_to_timeline(tags)

    assert tags == [PLACE, ShowFrame()]


def test_empty_frame_is_a_single_show_frame():
    tags: list = []

    Frame().add_to_timeline(tags)

    assert tags == [ShowFrame()]


def test_round_trip_through_split():
    """add_to_timeline followed by split gives back the same frame contents."""
    original = make_frame()
    tags: list = []
    original.add_to_timeline(tags)

    frames = split_frames(tags)

    assert len(frames) == 1
    assert frames[0].definitions == original.definitions
    assert frames[0].commands == original.commands
    assert frames[0].actions == original.actions
    assert frames[0].label == original.label


def test_copy_is_independent():
    original = make_frame()
    original.number = 3

    clone = original.copy()
    clone.commands.append(Remove(layer=1))

    assert clone.number == 3
    assert clone.label == "intro"
    assert original.commands == [PLACE]


def test_flatten_frames_concatenates_frames():
    first = make_frame()
    second = Frame()
    second.add_command(Remove(layer=1))

    tags = flatten_frames([first, second])

    assert tags[-2:] == [Remove(layer=1), ShowFrame()]
    assert tags.count(ShowFrame()) == 2
