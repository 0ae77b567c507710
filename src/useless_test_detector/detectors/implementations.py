"""Detectors for tests that build their own stand-ins for production code.

Detects:
- Function, class or constant definitions named like production roles
  (a test-local ``EventBuffer`` validates itself, not the real one)
- Typed object literals whose properties are asserted right after declaration
"""

import re

from .base import count_matches


ROLE_SUFFIXES: tuple[str, ...] = (
    "Buffer",
    "Parser",
    "Handler",
    "Helper",
    "Manager",
    "Service",
    "Client",
    "Builder",
    "Strategy",
)

INLINE_IMPLEMENTATION = re.compile(
    r"^\s*(?:function|class|const)\s+\w+(?:" + "|".join(ROLE_SUFFIXES) + r")",
    re.MULTILINE | re.ASCII,
)

# const config: Config = { ... };  expect(config.enabled)
HARDCODED_MOCK_ASSERTION = re.compile(
    r"const (\w+):\s*\w+\s*=\s*\{[^}]+\};\s+expect\(\1\.\w+\)",
    re.ASCII,
)

HARDCODED_MOCK_THRESHOLD = 3


def detect_inline_implementations(content: str, file_path: str) -> str | None:
    count = count_matches(INLINE_IMPLEMENTATION, content)
    if count > 0:
        return f"Defines {count} inline implementation(s) instead of importing real ones"
    return None


def detect_hardcoded_mocks(content: str, file_path: str) -> str | None:
    count = count_matches(HARDCODED_MOCK_ASSERTION, content)
    if count > HARDCODED_MOCK_THRESHOLD:
        return f"Creates {count} mock objects and asserts on hardcoded values"
    return None
