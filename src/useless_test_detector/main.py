"""FastAPI application for the useless test detector."""

import logging
import uuid

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .models import ScanConfiguration, ScanRequest, ScanResponse
from .report import build_summary
from .scanner import detect_useless_tests

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Useless Test Detector",
    description="Finds test files that don't actually test real implementations",
    version="0.1.0",
)

# CORS - allow common development origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://localhost:3000",
        "http://localhost:8000",
    ],
    allow_methods=["POST", "GET"],
    allow_headers=["*"],
)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


@app.post("/scan", response_model=ScanResponse)
def scan(request: ScanRequest) -> ScanResponse:
    """
    Scan directories for test files that provide no verification value.

    - **directories**: Root directories to scan (default: src, api)
    - **min_confidence**: Minimum confidence to report (high/medium/low)
    """
    try:
        logger.info(
            f"Scanning directories: {request.directories} "
            f"(min confidence: {request.min_confidence.value})"
        )

        results = detect_useless_tests(
            ScanConfiguration(
                directories=request.directories,
                min_confidence=request.min_confidence,
            )
        )

        return ScanResponse(
            scan_id=str(uuid.uuid4()),
            results=results,
            summary=build_summary(results),
        )

    except Exception as e:
        logger.error(f"Scan failed: {e}")
        raise HTTPException(status_code=500, detail=f"Scan failed: {str(e)}")
