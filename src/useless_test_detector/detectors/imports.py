"""Detector for unit tests that never import the code they test."""

import re

from .base import is_integration_test


TEST_UTILITY_PACKAGES: tuple[str, ...] = ("@testing-library",)

# from './widget' or from '../lib/widget', but not from './widget.test'
SOURCE_IMPORT = re.compile(
    r"""from ['"]\.\.?(?:/[^'"]*)?(?<!\.test)(?<!\.spec)['"]""",
)


def has_source_import(content: str) -> bool:
    return bool(SOURCE_IMPORT.search(content))


def detect_missing_source_imports(content: str, file_path: str) -> str | None:
    """Flag files that pull in test utilities but no production module.

    Integration tests are exempt; they are expected to go through real
    boundaries instead of importing modules directly.
    """
    uses_test_utilities = any(pkg in content for pkg in TEST_UTILITY_PACKAGES)
    if not uses_test_utilities:
        return None
    if has_source_import(content) or is_integration_test(file_path):
        return None
    return "No imports from actual implementation (only test utilities)"
