"""Normalize raw Member Data API payloads into typed records.

Upstream snapshot rows are loosely shaped: the same field can arrive as
``"Connected On"`` or ``connectedOn`` depending on the export. All synonym
handling lives here so the analyzers only see canonical fields.
"""
import logging
import re
from datetime import date, datetime
from typing import Any

from pydantic import ValidationError

from linkedin_lens.models import ActivityEvent, Connection
from linkedin_lens.utils.days import ms_to_day

_log = logging.getLogger(__name__)

SHARE_CONTENT_KEY = "com.linkedin.ugc.ShareContent"

CONNECTED_ON_KEYS = ("Connected On", "connectedOn")
INDUSTRY_KEYS = ("Industry", "industry")
POSITION_KEYS = ("Position", "position")
LOCATION_KEYS = ("Location", "location")
SHARE_COMMENTARY_KEYS = ("ShareCommentary", "shareCommentary")

_DATE_FORMATS = ("%d %b %Y", "%d %B %Y", "%b %d, %Y", "%B %d, %Y", "%m/%d/%Y", "%Y-%m-%d")


def _first_value(row: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = row.get(key)
        if value not in (None, ""):
            return value
    return None


def _text(value: Any, default: str = "Unknown") -> str:
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def parse_day(value: Any) -> date | None:
    """Parse a connect date from an export row.

    Accepts epoch milliseconds, ISO timestamps and the day-month-year
    strings LinkedIn uses in CSV exports (``18 Oct 2024``).
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return ms_to_day(value)
    text = str(value).strip()
    if not text:
        return None
    if re.fullmatch(r"\d{10,}", text):
        return ms_to_day(int(text))
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


# ── Envelopes ─────────────────────────────────────────────────────────────────

def changelog_elements(payload: dict[str, Any] | None) -> list[dict[str, Any]]:
    """Return the raw ``elements`` list of a changelog response."""
    if not isinstance(payload, dict):
        return []
    elements = payload.get("elements")
    if not isinstance(elements, list):
        return []
    return [e for e in elements if isinstance(e, dict)]


def snapshot_rows(payload: dict[str, Any] | None) -> list[dict[str, Any]]:
    """Return the flat rows of a snapshot response, across all elements."""
    rows: list[dict[str, Any]] = []
    for element in changelog_elements(payload):
        data = element.get("snapshotData")
        if isinstance(data, list):
            rows.extend(r for r in data if isinstance(r, dict))
    return rows


# ── Typed records ─────────────────────────────────────────────────────────────

def parse_changelog(payload: dict[str, Any] | None) -> list[ActivityEvent]:
    """Parse changelog elements into ActivityEvents, keeping upstream order."""
    events: list[ActivityEvent] = []
    for element in changelog_elements(payload):
        if not isinstance(element.get("activity"), dict):
            element = {**element, "activity": {}}
        try:
            events.append(ActivityEvent.model_validate(element))
        except ValidationError as exc:
            _log.debug("Skipping malformed changelog element: %s", exc)
    return events


def parse_connections(payload: dict[str, Any] | None) -> list[Connection]:
    return [
        Connection(
            connected_on=parse_day(_first_value(row, CONNECTED_ON_KEYS)),
            industry=_text(_first_value(row, INDUSTRY_KEYS)),
            position=_text(_first_value(row, POSITION_KEYS)),
            location=_text(_first_value(row, LOCATION_KEYS)),
        )
        for row in snapshot_rows(payload)
    ]


def parse_share_commentaries(payload: dict[str, Any] | None) -> list[str]:
    """Return the commentary text of every MEMBER_SHARE_INFO row."""
    return [
        _text(_first_value(row, SHARE_COMMENTARY_KEYS), default="")
        for row in snapshot_rows(payload)
    ]


# ── Post content accessors ────────────────────────────────────────────────────

def share_content(event: ActivityEvent) -> dict[str, Any]:
    specific = event.activity.get("specificContent")
    if not isinstance(specific, dict):
        return {}
    content = specific.get(SHARE_CONTENT_KEY)
    return content if isinstance(content, dict) else {}


def commentary_text(event: ActivityEvent) -> str:
    commentary = share_content(event).get("shareCommentary")
    if not isinstance(commentary, dict):
        return ""
    text = commentary.get("text")
    return text if isinstance(text, str) else ""
