"""Classification of Mumble server log lines into presence events.

Recognised lines look like::

    <85:commie(-1)> Authenticated
    <85:commie(-1)> Connection closed: ...
    <89:commie(-1)> Moved commie:89(-1) to #StephersFanClub[9:7]

The identity is everything between the session id and the first ``(``.
Names that contain ``(`` are therefore cut short.
"""

import re

from mumbot.domain.models import ROOT_LOCATION, EventKind, PresenceEvent

_PREFIX = r"<\d+:(?P<identity>[^(]+)\(-?\d+\)+> "

JOIN_PATTERN = re.compile(_PREFIX + r"Authenticated")
LEAVE_PATTERN = re.compile(_PREFIX + r"Connection closed")
MOVE_PATTERN = re.compile(_PREFIX + r"Moved .+? to #(?P<channel>.+?)\[\d+:\d+\]$")


def parse_line(line: str) -> PresenceEvent | None:
    """Parse one log line.

    Args:
        line: A complete log line without its newline.

    Returns:
        The presence event, or None if the line is not a presence change.
    """
    if match := JOIN_PATTERN.search(line):
        return PresenceEvent(EventKind.JOIN, match.group("identity"), ROOT_LOCATION)
    if match := LEAVE_PATTERN.search(line):
        return PresenceEvent(EventKind.LEAVE, match.group("identity"))
    if match := MOVE_PATTERN.search(line):
        return PresenceEvent(EventKind.MOVE, match.group("identity"), match.group("channel"))
    return None
