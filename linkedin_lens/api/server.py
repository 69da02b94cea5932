"""FastAPI server exposing the LinkedIn analytics report."""
import logging

from fastapi import FastAPI, Header, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from linkedin_lens import config
from linkedin_lens.analyzers.report import build_analytics
from linkedin_lens.fetchers.linkedin import fetch_all
from linkedin_lens.utils.days import DEFAULT_RANGE

logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
_log = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
}

app = FastAPI(title="linkedin-lens API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


# ── Endpoints ────────────────────────────────────────────────────────────────

@app.get("/api/health")
def health():
    return {"status": "ok"}


@app.options("/api/analytics-data")
def analytics_preflight(request: Request):
    """Answer bare OPTIONS requests that the CORS middleware does not treat as preflight."""
    headers = dict(CORS_HEADERS)
    allowed = config.CORS_ALLOW_ORIGINS
    origin = request.headers.get("origin")
    if "*" in allowed:
        headers["Access-Control-Allow-Origin"] = "*"
    elif origin in allowed:
        headers["Access-Control-Allow-Origin"] = origin
        headers["Vary"] = "Origin"
    return Response(status_code=200, headers=headers)


@app.get("/api/analytics-data")
async def analytics_data(
    time_range: str = Query(DEFAULT_RANGE, alias="timeRange"),
    member_id: str | None = Query(None, alias="memberId"),
    authorization: str | None = Header(None),
):
    """Fetch the member's upstream data and return the aggregated analytics."""
    if not authorization:
        return JSONResponse(status_code=401, content={"error": "No authorization token"})

    try:
        _log.info("Analytics data: starting analysis (timeRange=%s)", time_range)
        resources = await fetch_all(authorization)
        _log.info("Analytics data: upstream fetch settled")
        report = build_analytics(resources, time_range, member_id=member_id)
        _log.info("Analytics data: analysis complete")
    except Exception as exc:
        _log.exception("Analytics data error")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch analytics data", "details": str(exc)},
        )

    return report.model_dump(mode="json", by_alias=True)
