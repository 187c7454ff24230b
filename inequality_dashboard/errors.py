"""Exceptions raised while fetching and aggregating inequality data."""


class InequalityDataError(Exception):
    """Base error for the package."""


class UpstreamAPIError(InequalityDataError):
    """An upstream statistics API failed or returned a non-2xx status."""

    def __init__(
        self,
        source: str,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source
        self.message = message
        self.status_code = status_code
        self.url = url
