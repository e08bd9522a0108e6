"""Include/exclude filtering of certificate file names."""

import logging
import re
from typing import Optional, Pattern, Tuple

from crl_store_check.exceptions import FilterPatternError

logger = logging.getLogger(__name__)

MATCH_ALL = ""

# POSIX bracket classes, as Python character set contents (ASCII)
POSIX_CLASSES = {
    "alnum": "a-zA-Z0-9",
    "alpha": "a-zA-Z",
    "blank": " \\t",
    "cntrl": "\\x00-\\x1f\\x7f",
    "digit": "0-9",
    "graph": "\\x21-\\x7e",
    "lower": "a-z",
    "print": "\\x20-\\x7e",
    "punct": "\\x21-\\x2f\\x3a-\\x40\\x5b-\\x60\\x7b-\\x7e",
    "space": " \\t\\n\\r\\f\\v",
    "upper": "A-Z",
    "xdigit": "0-9A-Fa-f",
}

_CLASS_RE = re.compile(r"\[:([a-z]+):\]")

# Characters that are literal inside an ERE bracket but special to Python sets
_SET_SPECIALS = "\\[&~|"


def _translate_bracket(pattern: str, start: int) -> Tuple[str, int]:
    """Rewrite the bracket expression opening at ``start``; return it and the index after it."""
    out = ["["]
    i = start + 1
    if i < len(pattern) and pattern[i] == "^":
        out.append("^")
        i += 1
    if i < len(pattern) and pattern[i] == "]":
        out.append("\\]")
        i += 1
    while i < len(pattern) and pattern[i] != "]":
        match = _CLASS_RE.match(pattern, i)
        if match:
            name = match.group(1)
            if name not in POSIX_CLASSES:
                raise FilterPatternError(pattern, f"unknown character class [:{name}:]")
            out.append(POSIX_CLASSES[name])
            i = match.end()
            continue
        char = pattern[i]
        out.append("\\" + char if char in _SET_SPECIALS else char)
        i += 1
    if i >= len(pattern):
        # Unterminated; leave the rest for re to reject
        return pattern[start:], len(pattern)
    out.append("]")
    return "".join(out), i + 1


def translate_posix(pattern: str) -> str:
    """
    Rewrite an extended POSIX regular expression for the re module.

    Bracket classes such as ``[[:digit:]]`` become explicit ranges and
    characters that are literal inside ERE brackets are escaped. The rest of
    the syntax is shared between the two dialects.
    """
    out = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "\\":
            out.append(pattern[i : i + 2])
            i += 2
        elif char == "[":
            bracket, i = _translate_bracket(pattern, i)
            out.append(bracket)
        else:
            out.append(char)
            i += 1
    return "".join(out)


def _compile(pattern: str) -> Pattern[str]:
    try:
        return re.compile(translate_posix(pattern))
    except re.error as e:
        raise FilterPatternError(pattern, str(e))


def should_check(filename: str, include_pattern: Optional[str] = None, exclude_pattern: Optional[str] = None) -> bool:
    """
    Decide whether a certificate file takes part in the check.

    A non-empty exclude pattern disables the include pattern entirely.
    Patterns match anywhere in the file name.

    Args:
        filename: Certificate file name
        include_pattern: Regular expression files must match (default: all)
        exclude_pattern: Regular expression files must not match

    Returns:
        True if the file should be evaluated
    """
    return FileFilter(include_pattern, exclude_pattern).matches(filename)


class FileFilter:
    """Compiled include/exclude pair applied to every file of a run."""

    def __init__(self, include_pattern: Optional[str] = None, exclude_pattern: Optional[str] = None):
        self.exclude_pattern = exclude_pattern or None
        if self.exclude_pattern is not None:
            if include_pattern:
                logger.debug(f"Exclude pattern set, ignoring include pattern '{include_pattern}'")
            self.include_pattern = MATCH_ALL
            self._exclude: Optional[Pattern[str]] = _compile(self.exclude_pattern)
        else:
            self.include_pattern = include_pattern or MATCH_ALL
            self._exclude = None
        self._include = _compile(self.include_pattern)

    def matches(self, filename: str) -> bool:
        if self._exclude is not None:
            return self._exclude.search(filename) is None
        return self._include.search(filename) is not None

    @property
    def description(self) -> str:
        if self.exclude_pattern is not None:
            return f"Excluding files matching '{self.exclude_pattern}'"
        if self.include_pattern:
            return f"Including files matching '{self.include_pattern}'"
        return "Including all files"
