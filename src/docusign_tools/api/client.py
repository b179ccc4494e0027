"""DocuSign eSignature REST API client."""

import json
from typing import Any, Optional, TypeVar

import httpx
from pydantic import ValidationError
from rich.console import Console

from ..config import Config
from ..exceptions import (
    APIStatusError,
    AuthenticationError,
    NetworkError,
    RateLimitError,
    SerializationError,
)
from ..models import DocuSignModel, ErrorDetails

console = Console(stderr=True)

ModelT = TypeVar("ModelT", bound=DocuSignModel)


class DocuSignClient:
    """Async HTTP client shared by the DocuSign API modules.

    Paths handed to the verb methods must already be percent-encoded; they
    are appended to the configured base URL as-is.
    """

    def __init__(self, config: Config, http_client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self._client: Optional[httpx.AsyncClient] = http_client
        self._owns_client = http_client is None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.config.timeout)
        return self._client

    @property
    def headers(self) -> dict[str, str]:
        """Get authorization headers."""
        return {
            "Authorization": f"Bearer {self.config.access_token}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def url(self, path: str) -> str:
        """Build absolute URL for an already-encoded API path."""
        return self.config.base_url.rstrip("/") + "/" + path.lstrip("/")

    def _encode_body(self, body: Optional[DocuSignModel]) -> Optional[bytes]:
        if body is None:
            return None
        try:
            return json.dumps(body.to_body()).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Could not encode {type(body).__name__} request body: {e}") from e

    @staticmethod
    def _parse_error(response: httpx.Response) -> Optional[ErrorDetails]:
        """Parse a DocuSign error body, if the response carries one."""
        try:
            data = response.json()
        except ValueError:
            return None
        if not isinstance(data, dict):
            return None
        try:
            details = ErrorDetails.model_validate(data)
        except ValidationError:
            return None
        if details.error_code is None and details.message is None:
            return None
        return details

    def _handle_response(
        self,
        response: httpx.Response,
        response_model: Optional[type[ModelT]] = None,
        decode: bool = True,
    ) -> Any:
        """Map error statuses to exceptions and decode the response body."""
        request = response.request
        target = f"{request.method} {request.url.raw_path.decode('ascii')}"
        if not response.is_success:
            message = f"{target} failed: HTTP {response.status_code}"
            error = self._parse_error(response)
            if response.status_code == 401:
                raise AuthenticationError(message, response.status_code, response.text, error)
            if response.status_code == 429:
                raise RateLimitError(
                    status_code=response.status_code,
                    body=response.text,
                    error=error,
                    retry_after=response.headers.get("Retry-After"),
                )
            raise APIStatusError(message, response.status_code, response.text, error)

        if not decode:
            return None

        if not response.content:
            if response_model is None:
                return None
            raise SerializationError(f"Response from {target} has no body, expected {response_model.__name__}")

        try:
            data = response.json()
        except ValueError as e:
            raise SerializationError(f"Response from {target} is not valid JSON") from e

        if response_model is None:
            return data

        try:
            return response_model.model_validate(data)
        except ValidationError as e:
            raise SerializationError(f"Unexpected {response_model.__name__} response format from {target}: {e}") from e

    async def request(
        self,
        method: str,
        path: str,
        body: Optional[DocuSignModel] = None,
        response_model: Optional[type[ModelT]] = None,
        decode: bool = True,
    ) -> Any:
        """Send one request and return the decoded response.

        With decode=False any success body is discarded and None is returned.
        """
        content = self._encode_body(body)
        try:
            response = await self.client.request(
                method,
                self.url(path),
                content=content,
                headers=self.headers,
            )
        except httpx.TimeoutException as e:
            raise NetworkError(f"{method} {path} timed out") from e
        except httpx.RequestError as e:
            raise NetworkError(f"Network error during {method} {path}: {e}") from e

        if self.config.verbose:
            console.print(f"[dim]{method} {path} -> {response.status_code}[/dim]")

        return self._handle_response(response, response_model, decode)

    async def get(self, path: str, response_model: Optional[type[ModelT]] = None) -> Any:
        """Make authenticated GET request."""
        return await self.request("GET", path, response_model=response_model)

    async def put(self, path: str, body: DocuSignModel, response_model: Optional[type[ModelT]] = None) -> Any:
        """Make authenticated PUT request with a JSON body."""
        return await self.request("PUT", path, body=body, response_model=response_model)

    async def post(self, path: str, body: DocuSignModel, response_model: Optional[type[ModelT]] = None) -> Any:
        """Make authenticated POST request with a JSON body."""
        return await self.request("POST", path, body=body, response_model=response_model)

    async def delete(self, path: str, response_model: Optional[type[ModelT]] = None, decode: bool = True) -> Any:
        """Make authenticated DELETE request."""
        return await self.request("DELETE", path, response_model=response_model, decode=decode)

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "DocuSignClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
