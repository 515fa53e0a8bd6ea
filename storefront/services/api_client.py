"""HTTP client for the storefront REST API."""

from __future__ import annotations

from typing import Any, Callable

import httpx
from pydantic import ValidationError

from storefront.config import ApiSettings
from storefront.domain.models import ApiEnvelope
from storefront.logging import logger
from storefront.services.exceptions import ApiError, UnauthorizedError

TokenProvider = Callable[[], "str | None"]


class ApiClient:
    """Thin wrapper that adds auth headers and unwraps the ``{status, message, data}`` envelope.

    The bearer token is passed through untouched; no session handling happens here.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: ApiSettings | None = None,
        *,
        token_provider: TokenProvider | None = None,
        on_unauthorized: Callable[[], None] | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or ApiSettings()
        self._token_provider = token_provider or self._settings_token
        self._on_unauthorized = on_unauthorized

    @property
    def base_url(self) -> str:
        return str(self._settings.base_url).rstrip("/")

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        url = self.url_for(endpoint)
        request_headers = {"Content-Type": "application/json", **self._auth_headers()}
        if headers:
            request_headers.update(headers)

        try:
            response = await self._client.request(
                method,
                url,
                json=json,
                params=params,
                headers=request_headers,
                timeout=self._settings.request_timeout_seconds,
            )
        except httpx.RequestError as exc:
            logger.warning("api_request_failed", method=method, endpoint=endpoint, error=str(exc))
            raise ApiError(str(exc) or exc.__class__.__name__, status=0) from exc

        if response.status_code == 401:
            logger.info("api_unauthorized", method=method, endpoint=endpoint)
            if self._on_unauthorized is not None:
                self._on_unauthorized()
            raise UnauthorizedError()

        if response.is_error:
            message = self._error_message(response)
            logger.warning(
                "api_request_rejected",
                method=method,
                endpoint=endpoint,
                status_code=response.status_code,
                message=message,
            )
            raise ApiError(message, status=response.status_code)

        try:
            body = response.json()
        except ValueError as exc:
            raise ApiError("Response is not valid JSON.", status=0) from exc
        return _unwrap(body)

    async def get(self, endpoint: str, **kwargs: Any) -> Any:
        return await self.request("GET", endpoint, **kwargs)

    async def post(self, endpoint: str, data: Any = None, **kwargs: Any) -> Any:
        return await self.request("POST", endpoint, json=data, **kwargs)

    async def put(self, endpoint: str, data: Any, **kwargs: Any) -> Any:
        return await self.request("PUT", endpoint, json=data, **kwargs)

    async def delete(self, endpoint: str, **kwargs: Any) -> Any:
        return await self.request("DELETE", endpoint, **kwargs)

    async def fetch_json(self, url: str) -> Any:
        """Plain GET of an absolute URL; the body is returned without unwrapping."""

        try:
            response = await self._client.get(
                url,
                headers={"Content-Type": "application/json"},
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ApiError(
                f"Fetch error: {exc.response.status_code}", status=exc.response.status_code
            ) from exc
        except httpx.RequestError as exc:
            raise ApiError(str(exc) or exc.__class__.__name__, status=0) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise ApiError("Response is not valid JSON.", status=0) from exc

    def _settings_token(self) -> str | None:
        token = self._settings.token
        if not token:
            return None
        return token.get_secret_value()

    def _auth_headers(self) -> dict[str, str]:
        token = self._token_provider()
        if not token:
            return {}
        return {"Authorization": f"Bearer {token}"}

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict) and payload.get("message"):
            return str(payload["message"])
        return f"HTTP error! status: {response.status_code}"


def is_present(value: Any) -> bool:
    """Truthiness as the frontend sees it: empty lists and objects still count."""

    if value is None or value is False or value == "":
        return False
    if isinstance(value, (int, float)) and (value == 0 or value != value):
        return False
    return True


def _unwrap(body: Any) -> Any:
    if not isinstance(body, dict):
        return body
    try:
        envelope = ApiEnvelope.model_validate(body)
    except ValidationError:
        # Not shaped like an envelope; hand the body back as is.
        return body
    if is_present(envelope.data):
        return envelope.data
    return body


__all__ = ["ApiClient", "TokenProvider", "is_present"]
