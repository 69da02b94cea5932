"""Exceptions raised by the analytics client."""


class LinkedInLensError(Exception):
    """Base class for linkedin-lens errors."""


class AnalyticsAPIError(LinkedInLensError):
    """The analytics endpoint answered with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Analytics API error: {status_code} - {body}")
        self.status_code = status_code
        self.body = body


class MalformedResponseError(LinkedInLensError):
    """The analytics payload is missing one of its required sections."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"Invalid analytics data structure received (missing: {', '.join(missing)})")
        self.missing = missing
