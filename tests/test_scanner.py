"""Tests for suite scanning, filtering and ordering."""

import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from useless_test_detector.models import Confidence, ScanConfiguration
from useless_test_detector.scanner import (
    analyze_content,
    analyze_test_file,
    detect_useless_tests,
)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


def _write(root: Path, relative: str, content: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


INLINE_ONLY = (
    "class MockEventBuffer {}\n"
    "function TestParser() {}\n"
    "const mockHandler = jest.fn();\n"
)

MOCK_BLOCKS = "".join(
    f"const user{i}: User = {{ name: 'Ada', id: {i} }};\n"
    f"expect(user{i}.name).toBe('Ada');\n"
    for i in range(5)
)

TESTING_LIBRARY_NO_SOURCE = (
    "import { screen } from '@testing-library/react';\n" + MOCK_BLOCKS
)

TYPEOF_ONLY = "expect(typeof x).toBe('string');\n" * 4

EVERYTHING_WRONG = (
    "import type { Cart } from '../cart';\n"
    "import { screen } from '@testing-library/react';\n"
    "// In a real test we would render the cart\n"
    "class CartManager {}\n"
    "expect(typeof screen).toBe('object');\n"
)

CLEAN = (
    "import { add } from '../math';\n"
    "it('adds', () => {\n"
    "  expect(add(1, 2)).toBe(3);\n"
    "});\n"
)


class TestAnalyzeContent:
    """Test single-file analysis."""

    def test_scenario_inline_implementations(self):
        """Three role-suffixed definitions, nothing else: low confidence."""
        result = analyze_content(INLINE_ONLY, "src/events.test.ts")

        assert result is not None
        assert result.reasons == [
            "Defines 3 inline implementation(s) instead of importing real ones"
        ]
        assert result.confidence == Confidence.low

    def test_scenario_mocks_without_source_imports(self):
        """Hardcoded mocks plus testing-library-only imports: medium confidence."""
        result = analyze_content(TESTING_LIBRARY_NO_SOURCE, "src/profile.test.tsx")

        assert result is not None
        assert len(result.reasons) == 2
        assert result.reasons[0] == "Creates 5 mock objects and asserts on hardcoded values"
        assert result.reasons[1] == "No imports from actual implementation (only test utilities)"
        assert result.confidence == Confidence.medium

    def test_scenario_fake_integration(self):
        """Integration test with no boundary crossing: low confidence."""
        content = (
            "import { calculateTotal } from '../checkout';\n"
            "expect(calculateTotal([1, 2])).toEqual(3);\n"
        )
        result = analyze_content(content, "src/checkout.integration.test.ts")

        assert result is not None
        assert result.reasons == [
            "Integration test that never makes HTTP requests or renders components"
        ]
        assert result.confidence == Confidence.low

    def test_scenario_fake_integration_with_admission(self):
        """A second reason raises a fake integration test to medium."""
        content = (
            "// In a real test this would call the payment API\n"
            "expect(total).toEqual(3);\n"
        )
        result = analyze_content(content, "src/checkout.integration.test.ts")

        assert result is not None
        assert result.confidence == Confidence.medium

    def test_scenario_typeof_only(self):
        """Only typeof assertions: low confidence."""
        result = analyze_content(TYPEOF_ONLY, "src/types.test.ts")

        assert result is not None
        assert result.reasons == [
            "More than 50% of assertions test JavaScript built-ins (typeof, etc)"
        ]
        assert result.confidence == Confidence.low

    def test_many_reasons_is_high(self):
        result = analyze_content(EVERYTHING_WRONG, "src/cart.test.ts")

        assert result is not None
        assert len(result.reasons) >= 3
        assert result.confidence == Confidence.high

    def test_clean_file_returns_none(self):
        assert analyze_content(CLEAN, "src/math.test.ts") is None

    def test_line_count(self):
        result = analyze_content(TYPEOF_ONLY, "src/types.test.ts")
        # Trailing newline leaves an empty final segment
        assert result.line_count == 5


class TestAnalyzeTestFile:
    """Test reading and analyzing files from disk."""

    def test_reads_file(self, temp_dir):
        path = _write(temp_dir, "events.test.ts", INLINE_ONLY)

        result = analyze_test_file(path)

        assert result is not None
        assert result.file == str(path)
        assert result.line_count == 4

    def test_missing_file_raises(self, temp_dir):
        with pytest.raises(OSError):
            analyze_test_file(temp_dir / "gone.test.ts")

    def test_undecodable_bytes_are_ignored(self, temp_dir):
        path = temp_dir / "binary.test.ts"
        path.write_bytes(b"\xff\xfe" + TYPEOF_ONLY.encode())

        result = analyze_test_file(path)

        assert result is not None
        assert result.confidence == Confidence.low

    def test_byte_order_mark_is_dropped(self, temp_dir):
        """A BOM doesn't hide a definition on the first line."""
        path = temp_dir / "bom.test.ts"
        path.write_bytes(b"\xef\xbb\xbf" + b"class MockEventBuffer {}\n")

        result = analyze_test_file(path)

        assert result is not None
        assert result.confidence == Confidence.low
        assert result.line_count == 2

    def test_line_endings_kept_as_written(self, temp_dir):
        """Only newline characters separate lines, as in the raw text."""
        path = temp_dir / "cr.test.ts"
        path.write_bytes(b"class MockEventBuffer {}\rconst x = 1;\r")

        result = analyze_test_file(path)

        assert result is not None
        assert result.line_count == 1

    def test_crlf_line_count(self, temp_dir):
        path = temp_dir / "crlf.test.ts"
        path.write_bytes(b"class MockEventBuffer {}\r\nconst x = 1;\r\n")

        assert analyze_test_file(path).line_count == 3


class TestDetectUselessTests:
    """Test suite-level scanning."""

    def test_defaults(self):
        config = ScanConfiguration()
        assert config.directories == ["src", "api"]
        assert config.min_confidence == Confidence.low
        assert len(config.test_patterns) == 1

    def test_empty_directory_list(self):
        """Scanning no directories returns nothing."""
        assert detect_useless_tests(ScanConfiguration(directories=[])) == []

    def test_missing_directories(self, temp_dir):
        """A missing root does not stop the others from being scanned."""
        _write(temp_dir, "events.test.ts", INLINE_ONLY)

        results = detect_useless_tests(
            ScanConfiguration(directories=[str(temp_dir / "missing"), str(temp_dir)])
        )

        assert len(results) == 1

    def test_clean_files_never_reported(self, temp_dir):
        _write(temp_dir, "math.test.ts", CLEAN)
        _write(temp_dir, "events.test.ts", INLINE_ONLY)

        results = detect_useless_tests(ScanConfiguration(directories=[str(temp_dir)]))

        assert [Path(r.file).name for r in results] == ["events.test.ts"]
        assert all(r.reasons for r in results)

    def test_non_test_files_ignored(self, temp_dir):
        _write(temp_dir, "events.ts", INLINE_ONLY)
        assert detect_useless_tests(ScanConfiguration(directories=[str(temp_dir)])) == []

    def test_excluded_directories_pruned(self, temp_dir):
        _write(temp_dir, "node_modules/lib/events.test.ts", INLINE_ONLY)
        _write(temp_dir, "dist/events.test.ts", INLINE_ONLY)

        assert detect_useless_tests(ScanConfiguration(directories=[str(temp_dir)])) == []

    def test_sorted_by_confidence_then_lines(self, temp_dir):
        _write(temp_dir, "a_low_short.test.ts", INLINE_ONLY)
        _write(temp_dir, "b_low_long.test.ts", INLINE_ONLY + "\n" * 20)
        _write(temp_dir, "c_medium.test.tsx", TESTING_LIBRARY_NO_SOURCE)
        _write(temp_dir, "d_high.test.ts", EVERYTHING_WRONG)

        results = detect_useless_tests(ScanConfiguration(directories=[str(temp_dir)]))

        assert [Path(r.file).name for r in results] == [
            "d_high.test.ts",
            "c_medium.test.tsx",
            "b_low_long.test.ts",
            "a_low_short.test.ts",
        ]

    def test_min_confidence_filter_is_monotonic(self, temp_dir):
        _write(temp_dir, "low.test.ts", INLINE_ONLY)
        _write(temp_dir, "medium.test.tsx", TESTING_LIBRARY_NO_SOURCE)
        _write(temp_dir, "high.test.ts", EVERYTHING_WRONG)

        by_level = {
            level: {
                r.file for r in detect_useless_tests(
                    ScanConfiguration(directories=[str(temp_dir)], min_confidence=level)
                )
            }
            for level in ("high", "medium", "low")
        }

        assert len(by_level["high"]) == 1
        assert len(by_level["medium"]) == 2
        assert len(by_level["low"]) == 3
        assert by_level["high"] <= by_level["medium"] <= by_level["low"]

    def test_idempotent(self, temp_dir):
        _write(temp_dir, "low.test.ts", INLINE_ONLY)
        _write(temp_dir, "high.test.ts", EVERYTHING_WRONG)
        config = ScanConfiguration(directories=[str(temp_dir)])

        assert detect_useless_tests(config) == detect_useless_tests(config)

    def test_overlapping_roots_are_not_deduplicated(self, temp_dir):
        _write(temp_dir, "nested/events.test.ts", INLINE_ONLY)

        results = detect_useless_tests(
            ScanConfiguration(directories=[str(temp_dir), str(temp_dir / "nested")])
        )

        assert len(results) == 2
        assert Path(results[0].file).resolve() == Path(results[1].file).resolve()

    def test_vanished_file_is_skipped(self, temp_dir):
        """A file listed but gone by read time is dropped without error."""
        kept = _write(temp_dir, "events.test.ts", INLINE_ONLY)
        gone = str(temp_dir / "vanished.test.ts")

        with patch(
            "useless_test_detector.scanner.find_test_files",
            return_value=[gone, str(kept)],
        ):
            results = detect_useless_tests(ScanConfiguration(directories=["ignored"]))

        assert [r.file for r in results] == [str(kept)]

    def test_custom_patterns(self, temp_dir):
        _write(temp_dir, "events.check.ts", INLINE_ONLY)

        results = detect_useless_tests(
            ScanConfiguration(directories=[str(temp_dir)], test_patterns=[r"\.check\.ts$"])
        )

        assert len(results) == 1

    def test_invalid_min_confidence_rejected(self):
        with pytest.raises(ValidationError):
            ScanConfiguration(min_confidence="critical")
