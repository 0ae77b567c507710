"""Scan test suites for files that provide no real verification value."""

import logging
from pathlib import Path

from .detectors import DETECTORS, run_detectors
from .file_locator import find_test_files
from .models import ScanConfiguration, SuspiciousTest
from .scorer import confidence_rank, meets_threshold, score_confidence

logger = logging.getLogger(__name__)


def analyze_content(content: str, file_path: str) -> SuspiciousTest | None:
    """Run every detector over a file's text.

    Returns None when no detector fired.
    """
    reasons = run_detectors(content, file_path, DETECTORS)
    confidence = score_confidence(len(reasons))
    if confidence is None:
        return None

    return SuspiciousTest(
        file=file_path,
        reasons=reasons,
        confidence=confidence,
        line_count=len(content.split("\n")),
    )


def analyze_test_file(file_path: str | Path) -> SuspiciousTest | None:
    """Read and analyze a single test file.

    Line endings are kept as written and a leading byte order mark is dropped.

    Raises:
        OSError: If the file cannot be read.
    """
    with open(file_path, "r", encoding="utf-8", errors="ignore", newline="") as f:
        content = f.read()
    return analyze_content(content.removeprefix("\ufeff"), str(file_path))


def detect_useless_tests(config: ScanConfiguration | None = None) -> list[SuspiciousTest]:
    """
    Scan the configured directories for useless test files.

    Args:
        config: Scan options (defaults: src and api, minimum confidence low)

    Returns:
        Flagged files, highest confidence first and larger files first within a level
    """
    config = config or ScanConfiguration()

    test_files: list[str] = []
    for directory in config.directories:
        found = find_test_files(
            directory,
            patterns=config.test_patterns,
            excluded_markers=config.excluded_dir_markers,
        )
        logger.debug(f"Found {len(found)} test file(s) in {directory}")
        test_files.extend(found)

    suspicious: list[SuspiciousTest] = []
    for file_path in test_files:
        try:
            result = analyze_test_file(file_path)
        except OSError as e:
            logger.debug(f"Skipping unreadable test file {file_path}: {e}")
            continue
        if result is not None:
            suspicious.append(result)

    results = [
        test for test in suspicious
        if meets_threshold(test.confidence, config.min_confidence)
    ]
    results.sort(key=lambda t: (-confidence_rank(t.confidence), -t.line_count))

    logger.info(
        f"Scanned {len(test_files)} test file(s), flagged {len(results)} "
        f"at {config.min_confidence.value} confidence or above"
    )
    return results
