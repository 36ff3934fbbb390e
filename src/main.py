"""Furigana Fitter FastAPI application - furigana for conjugated Japanese words."""

import logging
import os

import jaconv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from models import (
    FitRequest,
    ParseRequest,
    FitResponse,
    ParseResponse,
    SegmentModel,
    FittingErrorDetail,
)
from services.errors import FittingError
from services.fitting import fit_furigana
from services.furigana import Kana, Kanji, kana_str, kanji_str, parse_furigana


# ============================================================================
# Configuration
# ============================================================================


VERSION = "0.1.0"
HOST = os.environ.get("FURIGANA_FITTER_HOST", "0.0.0.0")
PORT = int(os.environ.get("FURIGANA_FITTER_PORT", "8000"))
LOG_LEVEL = os.environ.get("FURIGANA_FITTER_LOG_LEVEL", "INFO").upper()

logger = logging.getLogger(__name__)


# ============================================================================
# FastAPI Application
# ============================================================================


app = FastAPI(
    title="Furigana Fitter API",
    description="""Fit dictionary-form furigana onto conjugated Japanese words.

## Features
- **Fitting**: Re-attach the reading of 行く ([行|い]く) to 行った ([行|い]った)
- **Okurigana**: Kanji written in kana keep their reading as plain kana
- **Irregular verbs**: 来る and 為る change their stem reading

## Endpoints
- `/fit` - Fit furigana onto a conjugated word
- `/parse` - Inspect how bracketed furigana is parsed
""",
    version=VERSION,
)


# ============================================================================
# Middleware
# ============================================================================


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Health Endpoints
# ============================================================================


@app.get("/", tags=["Health"])
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "service": "furigana-fitter", "version": VERSION}


@app.get("/health", tags=["Health"])
async def health() -> dict[str, str]:
    """Detailed health check."""
    return {"status": "healthy", "version": VERSION}


# ============================================================================
# Fitting Endpoints
# ============================================================================


@app.post(
    "/fit",
    response_model=FitResponse,
    responses={422: {"model": FittingErrorDetail}},
    tags=["Fitting"],
)
async def fit_endpoint(request: FitRequest) -> FitResponse:
    """
    Fit dictionary-form furigana onto a conjugated word.

    Returns the fitted furigana and the word's reading in hiragana.
    Responds with 422 when the word cannot be a form of the annotated word.
    """
    try:
        result = fit_furigana(request.word, request.furigana)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Fitting failed: {e!s}") from e

    if isinstance(result, FittingError):
        logger.info("Rejected %s for %s: %s", request.word, request.furigana, result.message)
        detail = FittingErrorDetail(error=result.value, message=result.message)
        raise HTTPException(status_code=422, detail=detail.model_dump())

    reading = jaconv.kata2hira(kana_str(parse_furigana(result)))
    return FitResponse(word=request.word, furigana=result, reading=reading)


# ============================================================================
# Debug Endpoints
# ============================================================================


@app.post("/parse", response_model=ParseResponse, tags=["Debug"])
async def parse_endpoint(request: ParseRequest) -> ParseResponse:
    """Parsed segments of bracketed furigana for debugging."""
    try:
        segments = parse_furigana(request.furigana)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Parsing failed: {e!s}") from e

    models: list[SegmentModel] = []
    for segment in segments:
        match segment:
            case Kana(text=text):
                models.append(SegmentModel(type="kana", text=text))
            case Kanji(literal=literal, readings=readings):
                models.append(SegmentModel(type="kanji", text=literal, readings=list(readings)))

    return ParseResponse(
        segments=models,
        kanji=kanji_str(segments),
        kana=kana_str(segments),
    )


# ============================================================================
# CLI Entry Point
# ============================================================================


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s")
    uvicorn.run(
        "main:app",
        host=HOST,
        port=PORT,
        log_level=LOG_LEVEL.lower(),
    )
