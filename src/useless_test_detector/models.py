"""Pydantic models for the useless test detector."""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .file_locator import DEFAULT_TEST_PATTERNS, EXCLUDED_DIR_MARKERS


DEFAULT_DIRECTORIES: tuple[str, ...] = ("src", "api")


class Confidence(str, Enum):
    """How likely a flagged test file is to be useless."""

    high = "high"
    medium = "medium"
    low = "low"


class SuspiciousTest(BaseModel):
    """A test file that triggered at least one anti-pattern detector."""

    model_config = ConfigDict(populate_by_name=True)

    file: str = Field(description="Path of the test file")
    reasons: list[str] = Field(description="Triggered anti-patterns, in detector order")
    confidence: Confidence = Field(description="Verdict derived from the number of reasons")
    line_count: int = Field(ge=0, alias="lineCount", description="Total lines in the file")


class ScanConfiguration(BaseModel):
    """Options for a scan. Built fresh per invocation."""

    directories: list[str] = Field(
        default_factory=lambda: list(DEFAULT_DIRECTORIES),
        description="Root directories to scan, in order (duplicates are kept)",
    )
    min_confidence: Confidence = Field(
        default=Confidence.low, description="Minimum confidence level to report"
    )
    test_patterns: list[re.Pattern] = Field(
        default_factory=lambda: list(DEFAULT_TEST_PATTERNS),
        description="File name patterns that identify test files",
    )
    excluded_dir_markers: list[str] = Field(
        default_factory=lambda: sorted(EXCLUDED_DIR_MARKERS),
        description="Directories whose name contains one of these are skipped",
    )


class ScanRequest(BaseModel):
    """Request body for scanning directories for useless tests."""

    directories: list[str] = Field(
        default_factory=lambda: list(DEFAULT_DIRECTORIES),
        description="Root directories to scan, relative to the service working directory",
    )
    min_confidence: Confidence = Field(
        default=Confidence.low, description="Minimum confidence level to report"
    )


class ScanSummary(BaseModel):
    """Counts of flagged files by confidence."""

    high: int = Field(default=0, description="Number of high confidence files")
    medium: int = Field(default=0, description="Number of medium confidence files")
    low: int = Field(default=0, description="Number of low confidence files")
    total: int = Field(default=0, description="Total number of flagged files")


class ScanResponse(BaseModel):
    """Full scan output."""

    scan_id: str = Field(description="Unique identifier for this scan")
    results: list[SuspiciousTest] = Field(
        default_factory=list, description="Flagged files, most suspicious first"
    )
    summary: ScanSummary = Field(default_factory=ScanSummary, description="Summary counts")
