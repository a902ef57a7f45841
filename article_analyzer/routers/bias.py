"""
Bias analysis endpoints.

POST /v1/bias/analyze - Scan text for subjective intensifiers and factive verbs
GET /v1/bias/lexicon - List the loaded lexicon terms
"""

import hashlib
import logging
import threading
from functools import lru_cache

from cachetools import TTLCache
from fastapi import APIRouter, Depends, HTTPException, Response, status

from article_analyzer.config import Settings, get_settings
from article_analyzer.lexicon import DetectorGroup
from article_analyzer.schemas.bias import BiasAnalyzeRequest, BiasAnalyzeResponse, LexiconResponse
from article_analyzer.services.bias_scan import BiasAnnotator, build_highlighted_html, get_bias_annotator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/bias", tags=["bias"])

# TTLCache is not thread-safe and sync routes run in a threadpool
_cache_lock = threading.Lock()


@lru_cache(maxsize=1)
def _get_report_cache() -> TTLCache:
    settings = get_settings()
    return TTLCache(maxsize=settings.BIAS_CACHE_SIZE, ttl=settings.BIAS_CACHE_TTL_SECONDS)


def invalidate_report_cache() -> None:
    """Clear cached analyze responses."""
    with _cache_lock:
        _get_report_cache().clear()


def _get_cache_key(text: str, detectors: tuple[DetectorGroup, ...], include_html: bool) -> str:
    """Generate cache key from a text digest and the request flags."""
    digest = hashlib.sha256(text.encode("utf-8")).hexdigest()
    names = ",".join(group.value for group in detectors)
    return f"bias:{digest}:{names}:{int(include_html)}"


def _ensure_encodable(text: str) -> None:
    """
    Reject text with lone surrogates. JSON escapes allow them, but they can
    be neither hashed nor returned as UTF-8. The detail does not echo the text.
    """
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Text is not valid Unicode: unpaired surrogate at position {e.start}",
        ) from e


def _requested_detectors(payload: BiasAnalyzeRequest, settings: Settings) -> list[DetectorGroup]:
    """Apply configured defaults to omitted detector flags."""
    flags = {
        DetectorGroup.SUBJECTIVE_INTENSIFIERS: (
            payload.subjective_intensifiers
            if payload.subjective_intensifiers is not None
            else settings.DEFAULT_SUBJECTIVE_INTENSIFIERS
        ),
        DetectorGroup.FACTIVE_VERBS: (
            payload.factive_verbs if payload.factive_verbs is not None else settings.DEFAULT_FACTIVE_VERBS
        ),
    }
    return [group for group, enabled in flags.items() if enabled]


@router.post("/analyze", response_model=BiasAnalyzeResponse, response_model_exclude_none=True)
def analyze_bias(
    payload: BiasAnalyzeRequest,
    response: Response,
    settings: Settings = Depends(get_settings),
    annotator: BiasAnnotator = Depends(get_bias_annotator),
) -> BiasAnalyzeResponse:
    """
    Scan text for subjective intensifiers and factive verbs.

    Returns one group per enabled detector with non-overlapping matches and
    zero-based character positions into the submitted text. Identical
    requests are served from cache (X-Cache: HIT).
    """
    if len(payload.text) > settings.MAX_TEXT_CHARS:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Text exceeds {settings.MAX_TEXT_CHARS} characters",
        )
    _ensure_encodable(payload.text)

    detectors = annotator.resolve_detectors(_requested_detectors(payload, settings))
    cache_key = _get_cache_key(payload.text, detectors, payload.include_html)

    with _cache_lock:
        cached = _get_report_cache().get(cache_key)
    if cached is not None:
        response.headers["X-Cache"] = "HIT"
        logger.debug("Bias report cache hit", extra={"event": "bias_cache", "cache": "hit"})
        return cached

    response.headers["X-Cache"] = "MISS"

    report = annotator.annotate(payload.text, detectors)
    data = report.to_dict()
    data["textLength"] = report.text_length
    if payload.include_html:
        data["html"] = build_highlighted_html(payload.text, report)

    result = BiasAnalyzeResponse.model_validate(data)

    with _cache_lock:
        _get_report_cache()[cache_key] = result

    logger.info(
        f"Analyzed {report.text_length} chars: {report.total} matches",
        extra={
            "event": "bias_analyze",
            "detectors": [group.value for group in detectors],
            "text_length": report.text_length,
            "retained": report.total,
            "cache": "miss",
        },
    )
    return result


@router.get("/lexicon", response_model=LexiconResponse)
def get_lexicon(annotator: BiasAnnotator = Depends(get_bias_annotator)) -> LexiconResponse:
    """List loaded lexicon terms by detector and category."""
    return annotator.lexicons.to_dict()
