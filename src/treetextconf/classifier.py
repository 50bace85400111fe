"""Classify a single configuration line."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

TERMINATOR = ":"
CONTENT_MARKER = "'"
COMMENT_MARKER = "#"
PAIR_DELIMITER = ": "

_LEADING_SPACE = " \t"


class LineKind(Enum):
    BLANK = auto()
    COMMENT = auto()
    CLOSE = auto()  # bare ":" closing the current group
    OPEN = auto()  # "name:" opening a group
    PAIR = auto()  # "name: value"
    LEAF = auto()


@dataclass(frozen=True)
class ClassifiedLine:
    """Result of classify_line.

    Attributes:
        kind: Structural meaning of the line.
        name: Node text for OPEN, PAIR and LEAF lines, empty otherwise.
        value: Value text, only set for PAIR lines.
    """

    kind: LineKind
    name: str = ""
    value: str | None = None


_BLANK = ClassifiedLine(LineKind.BLANK)
_COMMENT = ClassifiedLine(LineKind.COMMENT)
_CLOSE = ClassifiedLine(LineKind.CLOSE)


def classify_line(line: str) -> ClassifiedLine:
    """Decide what ``line`` means and extract its node text.

    Rules, in order:
    1. Leading spaces and tabs are skipped; nothing left means a blank line.
    2. A leading ``'`` is dropped and marks the line as escaped, so the
       content may start with whitespace, ``#`` or ``:``.
    3. Otherwise a leading ``#`` makes the line a comment.
    4. A trailing ``:`` is dropped and makes the line structural. Failing
       that, a trailing ``'`` is dropped unless it is the only content.
    5. Structural lines close the current group when nothing is left and the
       line was not escaped, and open a new group otherwise.
    6. Other lines split on the last ``": "`` into a pair, or become a leaf.

    Args:
        line: One logical line without its terminator.

    Returns:
        The classification with the extracted name and value.
    """
    start = len(line) - len(line.lstrip(_LEADING_SPACE))
    if start == len(line):
        return _BLANK

    escaped = False
    if line[start] == CONTENT_MARKER:
        start += 1
        escaped = True
    elif line[start] == COMMENT_MARKER:
        return _COMMENT

    end = len(line)
    structural = False
    if line.endswith(TERMINATOR):
        end -= 1
        structural = True
    elif line.endswith(CONTENT_MARKER) and start != end:
        end -= 1

    content = line[start:end]
    if structural:
        if not content and not escaped:
            return _CLOSE
        return ClassifiedLine(LineKind.OPEN, name=content)

    split = content.rfind(PAIR_DELIMITER)
    if split == -1:
        return ClassifiedLine(LineKind.LEAF, name=content)
    return ClassifiedLine(
        LineKind.PAIR,
        name=content[:split],
        value=content[split + len(PAIR_DELIMITER):],
    )
