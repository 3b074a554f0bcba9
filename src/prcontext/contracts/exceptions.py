"""Exception hierarchy for prcontext."""

from __future__ import annotations


class PRContextError(Exception):
    """Base exception for all prcontext errors."""


class ConfigError(PRContextError):
    """CI source selection or configuration failure."""


class UnrecognizedAddressError(PRContextError):
    """Address is not a known pull/merge request URL."""

    def __init__(self, address: str) -> None:
        super().__init__(f"not a recognized pull request address: {address!r}")
        self.address = address


class CISourceError(PRContextError):
    """Base CI source failure."""


class EventLoadError(CISourceError):
    """CI event payload could not be read or parsed."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class InvalidCIStateError(CISourceError):
    """Accessor invoked on a run whose event is not pull-request shaped."""

    def __init__(self, message: str, *, accessor: str) -> None:
        super().__init__(message)
        self.accessor = accessor


class AuthenticationError(PRContextError):
    """No usable review-posting credential in the environment."""
