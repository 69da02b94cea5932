"""Client for the analytics endpoint, with response-shape validation."""
from typing import Any

import httpx

from linkedin_lens.errors import AnalyticsAPIError, MalformedResponseError
from linkedin_lens.utils.days import DEFAULT_RANGE

REQUIRED_SECTIONS = ("postsEngagementsTrend", "connectionsGrowth", "engagementPerPost")


def validate_analytics_payload(data: Any) -> dict[str, Any]:
    """Raise MalformedResponseError unless every required section is present."""
    if not isinstance(data, dict):
        raise MalformedResponseError(list(REQUIRED_SECTIONS))
    missing = [key for key in REQUIRED_SECTIONS if data.get(key) is None]
    if missing:
        raise MalformedResponseError(missing)
    return data


class AnalyticsClient:
    """Fetch analytics reports from a running linkedin-lens server."""

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        timeout: float = 30,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._transport = transport

    def get_analytics(self, time_range: str = DEFAULT_RANGE, member_id: str | None = None) -> dict[str, Any]:
        params = {"timeRange": time_range}
        if member_id:
            params["memberId"] = member_id

        with httpx.Client(base_url=self.base_url, timeout=self.timeout, transport=self._transport) as client:
            response = client.get(
                "/api/analytics-data",
                params=params,
                headers={
                    "Authorization": f"Bearer {self.token}",
                    "Content-Type": "application/json",
                },
            )

        if response.is_error:
            raise AnalyticsAPIError(response.status_code, response.text)
        try:
            data = response.json()
        except ValueError:
            raise MalformedResponseError(list(REQUIRED_SECTIONS)) from None
        return validate_analytics_payload(data)
