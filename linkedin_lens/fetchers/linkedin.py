"""Fetch Member Data API resources through the LinkedIn proxy functions.

Each resource is fetched independently: a failed call is logged and becomes
``None`` so the rest of the report can still be built from what arrived.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from linkedin_lens import config

_log = logging.getLogger(__name__)

SNAPSHOT_ENDPOINT = "linkedin-snapshot"
CHANGELOG_ENDPOINT = "linkedin-changelog"


@dataclass(frozen=True)
class RawResources:
    """Raw upstream payloads for one request. ``None`` marks a failed fetch."""

    profile: dict[str, Any] | None = None
    connections: dict[str, Any] | None = None
    posts: dict[str, Any] | None = None
    changelog: dict[str, Any] | None = None
    skills: dict[str, Any] | None = None
    positions: dict[str, Any] | None = None


async def fetch_resource(
    client: httpx.AsyncClient,
    authorization: str,
    endpoint: str,
    domain: str | None = None,
    params: dict[str, Any] | None = None,
) -> Any:
    """GET one proxy resource; return decoded JSON or ``None`` on any failure."""
    query: dict[str, Any] = {}
    if domain:
        query["domain"] = domain
    query.update(params or {})
    label = f"{endpoint} {domain or ''}".strip()

    try:
        response = await client.get(
            endpoint,
            params=query,
            headers={
                "Authorization": authorization,
                "LinkedIn-Version": config.LINKEDIN_API_VERSION,
            },
        )
    except httpx.HTTPError as exc:
        _log.warning("Error fetching %s: %s", label, exc)
        return None

    if response.is_error:
        _log.warning("Failed to fetch %s: %s", label, response.status_code)
        return None

    try:
        return response.json()
    except ValueError as exc:
        _log.warning("Undecodable response from %s: %s", label, exc)
        return None


async def fetch_all(
    authorization: str,
    *,
    base_url: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RawResources:
    """Fetch the six upstream resources concurrently.

    All six calls are awaited together; one slow or failing resource never
    cancels the others.
    """
    async with httpx.AsyncClient(
        base_url=base_url or config.LINKEDIN_PROXY_URL,
        timeout=config.LINKEDIN_FETCH_TIMEOUT,
        transport=transport,
    ) as client:
        profile, connections, posts, changelog, skills, positions = await asyncio.gather(
            fetch_resource(client, authorization, SNAPSHOT_ENDPOINT, "PROFILE"),
            fetch_resource(client, authorization, SNAPSHOT_ENDPOINT, "CONNECTIONS"),
            fetch_resource(client, authorization, SNAPSHOT_ENDPOINT, "MEMBER_SHARE_INFO"),
            fetch_resource(
                client, authorization, CHANGELOG_ENDPOINT,
                params={"count": config.LINKEDIN_CHANGELOG_COUNT},
            ),
            fetch_resource(client, authorization, SNAPSHOT_ENDPOINT, "SKILLS"),
            fetch_resource(client, authorization, SNAPSHOT_ENDPOINT, "POSITIONS"),
        )

    return RawResources(
        profile=profile,
        connections=connections,
        posts=posts,
        changelog=changelog,
        skills=skills,
        positions=positions,
    )
