"""Detect test files that don't actually test real implementations."""

from .detectors import DETECTORS, Detector, run_detectors
from .file_locator import DEFAULT_TEST_PATTERNS, find_test_files
from .models import Confidence, ScanConfiguration, SuspiciousTest
from .scanner import analyze_content, analyze_test_file, detect_useless_tests
from .scorer import score_confidence

__all__ = [
    "Confidence",
    "DEFAULT_TEST_PATTERNS",
    "DETECTORS",
    "Detector",
    "ScanConfiguration",
    "SuspiciousTest",
    "analyze_content",
    "analyze_test_file",
    "detect_useless_tests",
    "find_test_files",
    "run_detectors",
    "score_confidence",
]
