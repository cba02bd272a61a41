"""Exception hierarchy for mailerlite-cli."""

from __future__ import annotations


class MailerLiteCLIError(Exception):
    """Base class for every error raised by mailerlite-cli."""


class ConfigError(MailerLiteCLIError):
    """The configuration file is malformed or holds invalid values."""


class ConfigNotFoundError(ConfigError):
    """No configuration file exists at the resolved path."""


class ProfileNotFoundError(ConfigError):
    """The requested profile is not defined in the configuration."""


class ApiError(MailerLiteCLIError):
    """
    A MailerLite API request failed.

    ``status_code`` is 0 when the request never produced an HTTP response
    (connection refused, DNS failure, ...).  ``errors`` carries the
    per-field validation messages from a 422 response body.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        errors: dict[str, list[str]] | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.errors = errors or {}
        super().__init__(str(self))

    def __str__(self) -> str:
        text = f"{self.message} (HTTP {self.status_code})" if self.status_code else self.message
        if self.errors:
            details = "; ".join(
                f"{field}: {', '.join(msgs)}" for field, msgs in sorted(self.errors.items())
            )
            text = f"{text}: {details}"
        return text


class FetchTimeoutError(MailerLiteCLIError):
    """A fetch did not complete before its deadline."""
