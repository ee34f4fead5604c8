"""A frame: everything a movie does between two ShowFrame tags."""

from typing import Any, Iterable, Protocol

from ..errors import InvalidArgumentError
from ..tags import Action, DoAction, FrameLabel, MovieTag, ShowFrame


class TagSink(Protocol):
    """Anything tags can be appended to, e.g. a list or a Movie."""

    def append(self, tag: MovieTag) -> Any: ...


class Frame:
    """
    A higher level view of one frame of a movie.

    Rather than handling FrameLabel, DoAction and ShowFrame tags directly, a
    frame holds the definitions, display list commands and actions that
    occur before the player is told to render. The marker tags are
    regenerated by ``add_to_timeline``.

    Attributes:
        number: Position of the frame in its timeline, 1-based. 0 until the
            owning layer or splitter assigns it.
        label: Optional frame name. ``None`` means no label was set.
        definitions: Tags defining objects used by the commands.
        commands: Tags that update the display list (and any other tag).
        actions: Actions executed when the frame is displayed.
    """

    def __init__(self, number: int = 0):
        self.number = number
        self.label: str | None = None
        self._definitions: list[MovieTag] = []
        self._commands: list[MovieTag] = []
        self._actions: list[Action] = []

    def __repr__(self) -> str:
        return (
            f"Frame(number={self.number}, label={self.label!r}, "
            f"definitions={len(self._definitions)}, commands={len(self._commands)}, "
            f"actions={len(self._actions)})"
        )

    @property
    def definitions(self) -> list[MovieTag]:
        return self._definitions

    @definitions.setter
    def definitions(self, value: Iterable[MovieTag]) -> None:
        self._definitions = _checked_list("definitions", value)

    @property
    def commands(self) -> list[MovieTag]:
        return self._commands

    @commands.setter
    def commands(self, value: Iterable[MovieTag]) -> None:
        self._commands = _checked_list("commands", value)

    @property
    def actions(self) -> list[Action]:
        return self._actions

    @actions.setter
    def actions(self, value: Iterable[Action]) -> None:
        self._actions = _checked_list("actions", value)

    def add_definition(self, tag: MovieTag) -> None:
        if tag is None:
            raise InvalidArgumentError("Cannot add None to frame definitions")
        self._definitions.append(tag)

    def add_command(self, tag: MovieTag) -> None:
        if tag is None:
            raise InvalidArgumentError("Cannot add None to frame commands")
        self._commands.append(tag)

    def add_action(self, action: Action) -> None:
        if action is None:
            raise InvalidArgumentError("Cannot add None to frame actions")
        self._actions.append(action)

    def is_empty(self) -> bool:
        """True if the frame only advances the timeline."""
        return not (self.label or self._definitions or self._commands or self._actions)

    def copy(self) -> "Frame":
        """Return a frame with the same number, label and copies of the lists."""
        clone = Frame(self.number)
        clone.label = self.label
        clone.definitions = self._definitions
        clone.commands = self._commands
        clone.actions = self._actions
        return clone

    def add_to_timeline(self, sink: TagSink) -> None:
        """
        Append the frame's contents to a flat tag sequence.

        Definitions come first so commands in the same frame can refer to
        them, then the label, the actions bundled in a single DoAction, the
        commands and finally the ShowFrame that renders the frame.

        Args:
            sink: List or Movie that receives the tags
        """
        for tag in self._definitions:
            sink.append(tag)

        if self.label:
            sink.append(FrameLabel(self.label))

        if self._actions:
            sink.append(DoAction(list(self._actions)))

        for tag in self._commands:
            sink.append(tag)

        sink.append(ShowFrame())


def _checked_list(name: str, value: Iterable[Any] | None) -> list[Any]:
    if value is None:
        raise InvalidArgumentError(f"Frame {name} cannot be None")
    items = list(value)
    if any(item is None for item in items):
        raise InvalidArgumentError(f"Frame {name} cannot contain None")
    return items


def flatten_frames(frames: Iterable[Frame]) -> list[MovieTag]:
    """Turn frames back into a flat tag sequence."""
    tags: list[MovieTag] = []
    for frame in frames:
        frame.add_to_timeline(tags)
    return tags
