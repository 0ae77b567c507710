"""Detector for tests that only exercise compile-time types."""

import re


TYPE_DECLARATION = re.compile(r"import type|interface \w+|type \w+ =", re.ASCII)

# Anything that proves code actually ran
RUNTIME_EXERCISE = re.compile(
    r"render\(|renderHook\(|new \w+\(|\.toHaveBeenCalled", re.ASCII
)


def detect_type_only(content: str, file_path: str) -> str | None:
    if TYPE_DECLARATION.search(content) and not RUNTIME_EXERCISE.search(content):
        return "Appears to test TypeScript types, not runtime behavior"
    return None
