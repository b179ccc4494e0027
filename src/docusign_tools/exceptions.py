"""Custom exception hierarchy for DocuSign tools."""

from typing import TYPE_CHECKING, Optional

import click
from rich.console import Console

if TYPE_CHECKING:
    from .models import ErrorDetails


class DocuSignError(click.ClickException):
    """Base exception for all DocuSign client and CLI errors."""

    exit_code = 1

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def show(self, file=None) -> None:
        """Display error with Rich formatting."""
        console = Console(stderr=True)
        console.print(f"[red]Error:[/red] {self.format_message()}")

    def format_message(self) -> str:
        """Override in subclasses for custom formatting."""
        return self.message


class ConfigurationError(DocuSignError):
    """Required setting (access token, account ID) is missing."""

    def format_message(self) -> str:
        return f"{self.message}\n\nSet it in your .env file or in the settings.yaml config file."


class NetworkError(DocuSignError):
    """Network connectivity issue."""

    def format_message(self) -> str:
        return f"{self.message}\n\nCheck your internet connection and try again."


class APIStatusError(DocuSignError):
    """API answered with a non-2xx status code."""

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str = "",
        error: Optional["ErrorDetails"] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.error = error

    @property
    def error_code(self) -> Optional[str]:
        """DocuSign error code from the response body, if any."""
        return self.error.error_code if self.error else None

    def format_message(self) -> str:
        if self.error and self.error.message:
            return f"{self.message}: {self.error.error_code} - {self.error.message}"
        return self.message


class AuthenticationError(APIStatusError):
    """Access token missing, expired or rejected."""

    def format_message(self) -> str:
        return f"{super().format_message()}\n\nCheck DOCUSIGN_ACCESS_TOKEN and re-authenticate if it expired."


class RateLimitError(APIStatusError):
    """API rate limit exceeded."""

    def __init__(
        self,
        message: str = "Rate limit exceeded. Please try again later.",
        status_code: int = 429,
        body: str = "",
        error: Optional["ErrorDetails"] = None,
        retry_after: Optional[str] = None,
    ):
        super().__init__(message, status_code, body, error)
        self.retry_after = retry_after

    def format_message(self) -> str:
        if self.retry_after:
            return f"Rate limit exceeded. Retry after {self.retry_after} seconds."
        return self.message


class SerializationError(DocuSignError):
    """Request body could not be encoded or response body could not be decoded."""

    pass
