"""Detector for placeholder tests whose authors say so in comments."""


ADMISSION_PHRASES: tuple[str, ...] = (
    "In a real test",
    "would be actual",
)


def detect_admission_comments(content: str, file_path: str) -> str | None:
    if any(phrase in content for phrase in ADMISSION_PHRASES):
        return "Contains comments admitting these aren't real tests"
    return None
