"""Text rendering and summary counts for scan results."""

from .models import Confidence, ScanSummary, SuspiciousTest


CONFIDENCE_ICONS = {
    Confidence.high: "🔴",
    Confidence.medium: "🟡",
    Confidence.low: "🟢",
}

NO_FINDINGS_MESSAGE = "✅ No obviously useless tests detected!"


def build_summary(results: list[SuspiciousTest]) -> ScanSummary:
    """Count flagged files by confidence level."""
    summary = ScanSummary()
    for test in results:
        if test.confidence == Confidence.high:
            summary.high += 1
        elif test.confidence == Confidence.medium:
            summary.medium += 1
        elif test.confidence == Confidence.low:
            summary.low += 1
    summary.total = summary.high + summary.medium + summary.low
    return summary


def format_report(results: list[SuspiciousTest]) -> str:
    """Render results as the human-readable console report."""
    if not results:
        return NO_FINDINGS_MESSAGE

    lines = [f"🔍 Found {len(results)} suspicious test file(s):", ""]

    for test in results:
        lines.append(f"{CONFIDENCE_ICONS[test.confidence]} {test.file}")
        lines.append(
            f"   Confidence: {test.confidence.value.upper()} | Lines: {test.line_count}"
        )
        lines.append("   Reasons:")
        for reason in test.reasons:
            lines.append(f"     - {reason}")
        lines.append("")

    lines.extend([
        "",
        "💡 Recommendation:",
        "   Review these files manually. High confidence files are likely useless.",
        "   Delete files that don't import and test actual implementations.",
        "",
    ])
    return "\n".join(lines)
