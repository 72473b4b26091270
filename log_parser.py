"""Log level counter — tallies bracketed level prefixes with one anchored regex."""

import logging
import re

logger = logging.getLogger(__name__)

LOG_LEVELS = ("INFO", "ERROR", "WARN")

# No trailing space is required after the closing bracket.
LOG_LEVEL_PATTERN = re.compile(r"^\[(INFO|ERROR|WARN)\]")


class InvalidLogEntryError(TypeError):
    """Raised when log input is not a sequence of strings."""


def match_level(line):
    """Return the level named by the line's prefix, or None when it has none."""
    if not isinstance(line, str):
        return None
    match = LOG_LEVEL_PATTERN.match(line)
    if not match:
        return None
    return match.group(1)


def count_log_levels(logs, strict=False):
    """Count occurrences of each recognized log level in ``logs``.

    Only levels seen at least once appear in the result, so an empty
    input yields ``{}``. Lines without a recognized ``[LEVEL]`` prefix are
    skipped. Non-string entries are skipped too, unless ``strict`` is set,
    in which case the first one raises :class:`InvalidLogEntryError`.
    """
    try:
        entries = iter(logs)
    except TypeError as e:
        raise InvalidLogEntryError(
            f"logs must be an iterable of strings, got {type(logs).__name__}"
        ) from e

    counts = {}
    for index, entry in enumerate(entries):
        if not isinstance(entry, str):
            if strict:
                raise InvalidLogEntryError(
                    f"log entry {index} is {type(entry).__name__}, expected str"
                )
            logger.debug("Skipping non-string log entry at index %d", index)
            continue

        level = match_level(entry)
        if level is None:
            logger.debug("Skipping unparseable log line at index %d: %r", index, entry)
            continue
        counts[level] = counts.get(level, 0) + 1

    return counts
