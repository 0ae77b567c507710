"""Anti-pattern detectors for test files, in evaluation order."""

from typing import Iterable

from .admissions import detect_admission_comments
from .assertions import detect_builtin_assertions
from .base import Detector, is_integration_test
from .implementations import detect_hardcoded_mocks, detect_inline_implementations
from .imports import detect_missing_source_imports
from .integration import detect_fake_integration
from .type_checks import detect_type_only

# Order only affects the order of reasons in a record, never the verdict
DETECTORS: tuple[Detector, ...] = (
    Detector("inline_implementation", detect_inline_implementations),
    Detector("type_only", detect_type_only),
    Detector("hardcoded_mock", detect_hardcoded_mocks),
    Detector("no_source_import", detect_missing_source_imports),
    Detector("admission_comment", detect_admission_comments),
    Detector("builtin_assertions", detect_builtin_assertions),
    Detector("fake_integration", detect_fake_integration),
)


def run_detectors(
    content: str,
    file_path: str,
    detectors: Iterable[Detector] = DETECTORS,
) -> list[str]:
    """Apply each detector to a file and collect the reasons that fired."""
    reasons: list[str] = []
    for detector in detectors:
        reason = detector.check(content, file_path)
        if reason:
            reasons.append(reason)
    return reasons


__all__ = [
    "DETECTORS",
    "Detector",
    "detect_admission_comments",
    "detect_builtin_assertions",
    "detect_fake_integration",
    "detect_hardcoded_mocks",
    "detect_inline_implementations",
    "detect_missing_source_imports",
    "detect_type_only",
    "is_integration_test",
    "run_detectors",
]
