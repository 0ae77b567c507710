"""Detector for assertions that only check language built-ins.

``expect(typeof value).toBe('string')`` confirms a string is a string; when
most of a file's assertions look like that, it adds no domain coverage.
"""

import re

from .base import count_matches


BUILTIN_ASSERTION = re.compile(
    r"""expect\(typeof|expect\(.*\)\.toBe\(['"](?:string|number|boolean)""",
)

ANY_ASSERTION = re.compile(r"expect\(")

BUILTIN_RATIO_THRESHOLD = 0.5


def builtin_assertion_ratio(content: str) -> float:
    """Share of ``expect(`` calls that only check a primitive type.

    Returns 0.0 when the file has no assertions.
    """
    total = count_matches(ANY_ASSERTION, content)
    if total == 0:
        return 0.0
    return count_matches(BUILTIN_ASSERTION, content) / total


def detect_builtin_assertions(content: str, file_path: str) -> str | None:
    if builtin_assertion_ratio(content) > BUILTIN_RATIO_THRESHOLD:
        return "More than 50% of assertions test JavaScript built-ins (typeof, etc)"
    return None
