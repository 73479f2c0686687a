"""Keyboard event parsing.

Only six keys do anything; every other key parses to None and is ignored.
"""

from typing import Optional

from blessed.keyboard import Keystroke

from tapedeck.domain.playback.transport import Action

KEY_ACTIONS = {
    "KEY_ESCAPE": Action.QUIT,
    "KEY_RIGHT": Action.NEXT,
    "KEY_LEFT": Action.PREVIOUS,
    "KEY_UP": Action.VOLUME_UP,
    "KEY_DOWN": Action.VOLUME_DOWN,
}


def parse_key(key: Keystroke) -> Optional[Action]:
    """
    Map a keystroke to a transport action.

    Args:
        key: blessed Keystroke

    Returns:
        The bound action, or None for unbound keys
    """
    if key.is_sequence:
        return KEY_ACTIONS.get(key.name)
    if key == " ":
        return Action.TOGGLE
    if key == "\x1b":  # Bare escape when no sequence was decoded
        return Action.QUIT
    return None


def describe_key(key: Keystroke) -> str:
    """Readable key label for events and logs."""
    if key.is_sequence and key.name:
        return key.name
    return repr(str(key))
