"""Split a flat tag sequence into frames."""

import logging
from typing import Iterable

from ..tags import TagRole, classify
from .frame import Frame

logger = logging.getLogger(__name__)


def split_frames(tags: Iterable[object]) -> list[Frame]:
    """
    Group tags into frames, one per ShowFrame.

    A DoAction replaces the frame's actions and a FrameLabel its label, so
    the last one before the ShowFrame wins. Definitions and everything else
    are appended in order. Tags after the final ShowFrame never get rendered
    and are dropped.

    Args:
        tags: Tags of a movie in playing order

    Returns:
        Frames numbered from 1
    """
    frames: list[Frame] = []
    current = Frame()
    pending = 0

    for tag in tags:
        if tag is None:
            logger.debug("Skipping None entry in tag sequence")
            continue
        role = classify(tag)
        pending += 1
        if role is TagRole.ACTION:
            actions = getattr(tag, "actions", None) or []
            current.actions = [action for action in actions if action is not None]
            if len(current.actions) != len(actions):
                logger.debug("Skipping None entries in DoAction")
        elif role is TagRole.LABEL:
            current.label = tag.label
        elif role is TagRole.DEFINITION:
            current.add_definition(tag)
        elif role is TagRole.SHOW_FRAME:
            current.number = len(frames) + 1
            frames.append(current)
            current = Frame()
            pending = 0
        else:
            current.add_command(tag)

    if pending:
        logger.debug("Discarding %d tag(s) after the last ShowFrame", pending)
    logger.debug("Split movie into %d frame(s)", len(frames))
    return frames
