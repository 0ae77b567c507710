"""Shared types and helpers for anti-pattern detectors."""

import re
from typing import Callable, NamedTuple

from ..file_locator import TEST_FILE_EXTENSIONS


class Detector(NamedTuple):
    """A single heuristic rule applied to a test file's text.

    ``check`` receives the file content and path and returns a reason string
    when the anti-pattern is present, otherwise None.
    """

    name: str
    check: Callable[[str, str], str | None]


INTEGRATION_TEST_PATTERN = re.compile(
    r"(?:^|[./\\])(?:integration|e2e)\.(?:test|spec)\.(?:"
    + "|".join(TEST_FILE_EXTENSIONS)
    + r")$"
)


def is_integration_test(file_path: str) -> bool:
    """Check if a path names an integration or end-to-end test file."""
    return bool(INTEGRATION_TEST_PATTERN.search(file_path))


def count_matches(pattern: re.Pattern, content: str) -> int:
    return sum(1 for _ in pattern.finditer(content))
