from dataclasses import replace
import json
import logging
import os
from pathlib import Path
import re
import sys

from fastapi import FastAPI, HTTPException, Query, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Ensure local src package is importable in serverless runtime.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from seo_search_box import __version__, classify, route_search  # noqa: E402
from seo_search_box.classification import (  # noqa: E402
    ClassifierConfig,
    ParsedInput,
    extract_domain,
    get_suggested_type,
    is_valid_domain,
    is_valid_url,
)
from seo_search_box.exceptions import SeoSearchBoxError  # noqa: E402

app = FastAPI(title="seo-search-box API", version=__version__)
logger = logging.getLogger(__name__)
SAFE_YAML_KEY = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

raw_origins = os.getenv("FRONTEND_ORIGINS", "*")
allow_origins = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]
CLASSIFIER_PROFILE = os.getenv("CLASSIFIER_PROFILE", "full")
max_query_length_raw = os.getenv("MAX_QUERY_LENGTH")
suggest_min_confidence_raw = os.getenv("SUGGEST_MIN_CONFIDENCE")
MAX_BATCH_SIZE = 100
try:
    MAX_QUERY_LENGTH = int(max_query_length_raw) if max_query_length_raw else 2048
except ValueError:
    MAX_QUERY_LENGTH = 2048
try:
    SUGGEST_MIN_CONFIDENCE = max(
        0.0, min(1.0, float(suggest_min_confidence_raw) if suggest_min_confidence_raw else 0.7)
    )
except ValueError:
    SUGGEST_MIN_CONFIDENCE = 0.7

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> dict[str, bool]:
    return {"ok": True}


class MetadataResponse(BaseModel):
    domain: str | None = None
    protocol: str | None = None
    path: str | None = None
    phoneFormatted: str | None = None
    countryCode: str | None = None
    isLatLng: bool | None = None


class RouteResponse(BaseModel):
    report: str
    query: str
    cacheKey: str
    searchCacheKey: str
    ttlSeconds: int


class ClassifyResponse(BaseModel):
    type: str
    value: str
    normalized: str
    confidence: float
    detector: str
    metadata: MetadataResponse
    route: RouteResponse


class BatchClassifyRequest(BaseModel):
    queries: list[str] = Field(min_length=1)
    profile: str | None = None


class BatchClassifyResponse(BaseModel):
    profile: str
    total: int
    results: list[ClassifyResponse]


class SuggestResponse(BaseModel):
    type: str | None = None


class ValidateResponse(BaseModel):
    isValidUrl: bool
    isValidDomain: bool
    domain: str | None = None


def _yaml_scalar(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, ensure_ascii=False)


def _yaml_key(key: str) -> str:
    return key if SAFE_YAML_KEY.match(key) else json.dumps(key, ensure_ascii=False)


def _dump_yaml(value: object, indent: int = 0) -> list[str]:
    prefix = "  " * indent
    if isinstance(value, dict):
        if not value:
            return [f"{prefix}{{}}"]
        lines: list[str] = []
        for k, v in value.items():
            key = _yaml_key(str(k))
            if isinstance(v, (dict, list)):
                lines.append(f"{prefix}{key}:")
                lines.extend(_dump_yaml(v, indent + 1))
            else:
                lines.append(f"{prefix}{key}: {_yaml_scalar(v)}")
        return lines

    if isinstance(value, list):
        if not value:
            return [f"{prefix}[]"]
        lines = []
        for item in value:
            if isinstance(item, (dict, list)):
                lines.append(f"{prefix}-")
                lines.extend(_dump_yaml(item, indent + 1))
            else:
                lines.append(f"{prefix}- {_yaml_scalar(item)}")
        return lines

    return [f"{prefix}{_yaml_scalar(value)}"]


def _resolve_config(profile: str | None) -> ClassifierConfig:
    try:
        return ClassifierConfig.for_profile(profile or CLASSIFIER_PROFILE)
    except SeoSearchBoxError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _validate_query(q: str) -> None:
    if len(q) > MAX_QUERY_LENGTH:
        raise HTTPException(status_code=413, detail="query too long")


def _to_response(parsed: ParsedInput) -> ClassifyResponse:
    route = route_search(parsed)
    meta = parsed.metadata
    return ClassifyResponse(
        type=parsed.type,
        value=parsed.value,
        normalized=parsed.normalized,
        confidence=parsed.confidence,
        detector=parsed.detector,
        metadata=MetadataResponse(
            domain=meta.domain,
            protocol=meta.protocol,
            path=meta.path,
            phoneFormatted=meta.phone_formatted,
            countryCode=meta.country_code,
            isLatLng=meta.is_lat_lng,
        ),
        route=RouteResponse(
            report=route.report,
            query=route.query,
            cacheKey=route.cache_key,
            searchCacheKey=route.search_cache_key,
            ttlSeconds=route.ttl_seconds,
        ),
    )


@app.get("/openapi.yaml", include_in_schema=False)
def openapi_yaml() -> Response:
    schema = app.openapi()
    body = "\n".join(_dump_yaml(schema)) + "\n"
    return Response(content=body, media_type="application/yaml")


@app.get("/classify", response_model=ClassifyResponse, response_model_exclude_none=True)
def classify_query(
    q: str = Query(...),
    profile: str | None = Query(default=None),
) -> ClassifyResponse:
    _validate_query(q)
    config = _resolve_config(profile)
    return _to_response(classify(q, config=config))


@app.post("/classify/batch", response_model=BatchClassifyResponse, response_model_exclude_none=True)
def classify_batch(body: BatchClassifyRequest) -> BatchClassifyResponse:
    if len(body.queries) > MAX_BATCH_SIZE:
        raise HTTPException(status_code=413, detail=f"at most {MAX_BATCH_SIZE} queries per batch")
    for q in body.queries:
        _validate_query(q)

    profile = body.profile or CLASSIFIER_PROFILE
    config = _resolve_config(profile)
    results = [_to_response(classify(q, config=config)) for q in body.queries]
    logger.info("classified batch of %d queries (profile=%s)", len(results), profile)
    return BatchClassifyResponse(profile=profile, total=len(results), results=results)


@app.get("/suggest", response_model=SuggestResponse)
def suggest(response: Response, q: str = Query(default="")) -> SuggestResponse:
    _validate_query(q)
    config = replace(_resolve_config(None), suggestion_min_confidence=SUGGEST_MIN_CONFIDENCE)
    response.headers["Cache-Control"] = "public, max-age=60"
    return SuggestResponse(type=get_suggested_type(q, config=config))


@app.get("/validate", response_model=ValidateResponse)
def validate(q: str = Query(...)) -> ValidateResponse:
    _validate_query(q)
    value = q.strip()
    return ValidateResponse(
        isValidUrl=is_valid_url(value),
        isValidDomain=is_valid_domain(value),
        domain=extract_domain(value),
    )
