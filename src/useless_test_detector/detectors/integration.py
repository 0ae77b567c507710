"""Detector for integration tests that never cross a real boundary."""

import re

from .base import is_integration_test


NETWORK_CALL = re.compile(r"fetch\(|request\(|axios\.|supertest")
COMPONENT_RENDER = re.compile(r"render\(")


def detect_fake_integration(content: str, file_path: str) -> str | None:
    if not is_integration_test(file_path):
        return None
    if NETWORK_CALL.search(content) or COMPONENT_RENDER.search(content):
        return None
    return "Integration test that never makes HTTP requests or renders components"
