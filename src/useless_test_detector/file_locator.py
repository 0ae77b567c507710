"""Locate candidate test files under a directory tree."""

import logging
import os
import re
from pathlib import Path
from typing import Iterable


logger = logging.getLogger(__name__)

TEST_FILE_EXTENSIONS: tuple[str, ...] = ("ts", "tsx", "js", "jsx", "mjs", "cjs")

DEFAULT_TEST_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"\.(?:test|spec)\.(?:" + "|".join(TEST_FILE_EXTENSIONS) + r")$"),
)

# Build output and vendored dependencies; matched as substrings of the dir name
EXCLUDED_DIR_MARKERS: frozenset[str] = frozenset({
    "node_modules",
    "dist",
})


def is_excluded_dir(name: str, markers: Iterable[str] = EXCLUDED_DIR_MARKERS) -> bool:
    """Check if a directory name contains any exclusion marker."""
    return any(marker in name for marker in markers)


def is_test_file(name: str, patterns: Iterable[re.Pattern] = DEFAULT_TEST_PATTERNS) -> bool:
    """Check if a bare file name matches at least one test pattern."""
    return any(pattern.search(name) for pattern in patterns)


def _log_walk_error(error: OSError) -> None:
    logger.debug(f"Skipping unreadable directory {error.filename}: {error.strerror}")


def find_test_files(
    directory: str | Path,
    patterns: Iterable[re.Pattern] | None = None,
    excluded_markers: Iterable[str] | None = None,
) -> list[str]:
    """Find all test files under a directory, recursively.

    Excluded directories are pruned before they are entered. Symlinked
    directories are followed unless the link points back at one of its own
    ancestors. A directory that does not exist or cannot be read contributes
    no files instead of failing.

    Args:
        directory: Root directory to search.
        patterns: File name patterns (default: DEFAULT_TEST_PATTERNS).
        excluded_markers: Directory name substrings to prune (default: EXCLUDED_DIR_MARKERS).

    Returns:
        Paths of matching files, root joined with the relative parts.
    """
    pats = tuple(patterns) if patterns is not None else DEFAULT_TEST_PATTERNS
    markers = tuple(excluded_markers) if excluded_markers is not None else tuple(EXCLUDED_DIR_MARKERS)
    files: list[str] = []
    # Real paths of each walked directory's ancestors, itself included
    ancestors: dict[str, frozenset[str]] = {}

    for root, dirs, names in os.walk(directory, onerror=_log_walk_error, followlinks=True):
        chain = ancestors.pop(root, frozenset()) | {os.path.realpath(root)}
        kept: list[str] = []
        for d in sorted(dirs):
            if is_excluded_dir(d, markers):
                continue
            child = os.path.join(root, d)
            if os.path.realpath(child) in chain:
                logger.debug(f"Skipping symlink cycle at {child}")
                continue
            ancestors[child] = chain
            kept.append(d)
        dirs[:] = kept

        for name in sorted(names):
            if is_test_file(name, pats):
                files.append(os.path.join(root, name))

    return files
