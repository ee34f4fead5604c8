"""Layers: independent timelines that are merged into a single movie."""

import logging
from typing import Iterable

from ..errors import FrameRangeError, InvalidArgumentError
from .frame import Frame

logger = logging.getLogger(__name__)


class Layer:
    """
    The timeline of the objects displayed on one layer of the display list.

    Building each object's animation on its own layer avoids interleaving
    the commands for several objects by hand. The layers are then combined
    with ``merge_layers``. All layers are assumed to start at frame 1.

    Objects on a higher layer number are drawn in front of those on a lower
    one, so each layer should have a unique number.
    """

    def __init__(self, number: int):
        self._layer_number = number
        self._frames: list[Frame] = []

    def __repr__(self) -> str:
        return f"Layer(number={self._layer_number}, frames={len(self._frames)})"

    @property
    def layer_number(self) -> int:
        return self._layer_number

    def get_layer(self) -> int:
        return self._layer_number

    @property
    def frames(self) -> tuple[Frame, ...]:
        return tuple(self._frames)

    def add(self, frame: Frame) -> None:
        """
        Append a frame and number it after the frames already on the layer.

        Raises:
            InvalidArgumentError: If frame is None or already on this layer
        """
        if frame is None:
            raise InvalidArgumentError("Cannot add None to a layer")
        if any(existing is frame for existing in self._frames):
            raise InvalidArgumentError(
                f"Frame {frame.number} is already on layer {self._layer_number}"
            )
        self._frames.append(frame)
        frame.number = len(self._frames)

    def extend(self, frames: Iterable[Frame]) -> None:
        for frame in frames:
            self.add(frame)


def merge_layers(layers: Iterable[Layer]) -> list[Frame]:
    """
    Merge layers into a single timeline.

    The result has one frame for every number up to the highest frame
    number on any layer, including numbers no layer uses. Layers are
    applied in order and a frame replaces the actions, commands and
    definitions already in its slot, so the last layer wins when two
    layers share a frame number. A label is only replaced by a frame that
    has one.

    Raises:
        FrameRangeError: If a frame number is less than 1
    """
    layers = list(layers)

    last_frame = 0
    for layer in layers:
        for frame in layer.frames:
            if frame.number < 1:
                raise FrameRangeError(frame.number, layer.layer_number)
            last_frame = max(last_frame, frame.number)

    merged = [Frame(number) for number in range(1, last_frame + 1)]

    for layer in layers:
        for frame in layer.frames:
            selected = merged[frame.number - 1]
            selected.actions = frame.actions
            selected.commands = frame.commands
            selected.definitions = frame.definitions
            if frame.label is not None:
                selected.label = frame.label

    logger.debug("Merged %d layer(s) into %d frame(s)", len(layers), last_frame)
    return merged
