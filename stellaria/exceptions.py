"""Exceptions raised by the Stellaria client."""


class StellariaError(Exception):
    """Base exception for the Stellaria client."""


class ApodParamsError(StellariaError, ValueError):
    """APOD query parameters failed validation."""


class InvalidRangeError(ApodParamsError):
    """Start date of a range falls after its end date."""


class InvalidCountError(ApodParamsError):
    """Random count is not an integer in the accepted range."""


class InvalidDateError(ApodParamsError):
    """Single date falls outside the published APOD archive."""


class RequestError(StellariaError):
    """The HTTP request could not be completed."""


class ApodApiError(StellariaError):
    """The APOD service answered with an error."""

    def __init__(self, code: int, msg: str, service_version: str = "unknown"):
        self.code = code
        self.msg = msg
        self.service_version = service_version
        super().__init__(f"http code {code}: {msg}")


class ResponseParseError(StellariaError):
    """The response body is not the JSON shape we expect."""
