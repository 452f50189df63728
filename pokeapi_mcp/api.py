"""HTTP access to PokeAPI with failures mapped to result values."""

from __future__ import annotations

import logging
from typing import Optional, Union

import requests
from pydantic import ValidationError

from .config import Settings, get_settings
from .models import (
    FailureKind,
    FetchFailure,
    FetchResult,
    FetchSuccess,
    PokemonRecord,
    RecordResult,
    SpriteAsset,
)

logger = logging.getLogger(__name__)

# Connection-level faults reported as network errors rather than unexpected ones.
TRANSPORT_ERRORS = (
    requests.Timeout,
    requests.ConnectionError,
    requests.exceptions.ChunkedEncodingError,
    requests.exceptions.ContentDecodingError,
    requests.exceptions.InvalidHeader,
)


class PokeAPIClient:
    """Blocking PokeAPI client; one request per call, no caching or retries."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()

    def url_for(self, path: str) -> str:
        """Join a relative API path onto the configured base URL.

        Args:
            path: Path segment such as "pokemon/25".

        Returns:
            Absolute request URL.
        """
        return f"{self.settings.api_base}/{path}"

    def fetch_json(self, path: str) -> FetchResult:
        """Fetch and decode a JSON document relative to the API base.

        Args:
            path: Path segment such as "pokemon/25" or "pokemon/pikachu".

        Returns:
            FetchSuccess with the decoded body, or FetchFailure describing
            what went wrong. Never raises.
        """
        url = self.url_for(path)
        logger.debug("GET %s", url)
        try:
            response = requests.get(url)
        except TRANSPORT_ERRORS as exc:
            return _failure(
                f"Network error communicating with PokeAPI: {type(exc).__name__} - {exc}",
                kind=FailureKind.TRANSPORT_FAULT,
            )
        except Exception as exc:
            return _failure(
                f"An unexpected error occurred: {type(exc).__name__} - {exc}",
                kind=FailureKind.UNEXPECTED,
            )

        status = str(response.status_code)
        if response.status_code == 404:
            return _failure(f"Pokemon not found: {path}", status=status, kind=FailureKind.NOT_FOUND)
        # Response.ok is true for 3xx; only 2xx counts as success here.
        if not 200 <= response.status_code < 300:
            return _failure(
                f"API request failed: {status} {response.reason}",
                status=status,
                kind=FailureKind.UPSTREAM_ERROR,
            )

        try:
            return FetchSuccess(data=response.json())
        except ValueError as exc:
            # requests.JSONDecodeError subclasses ValueError
            return _failure(f"Failed to parse API response: {exc}", kind=FailureKind.PARSE_ERROR)

    def load_pokemon(self, name_or_id: Union[str, int]) -> RecordResult:
        """Fetch a Pokemon and validate it into a PokemonRecord.

        Args:
            name_or_id: Pokemon name or national dex number, passed through as-is.

        Returns:
            The parsed record, or the FetchFailure from the request or parse step.
        """
        result = self.fetch_json(f"pokemon/{name_or_id}")
        if isinstance(result, FetchFailure):
            return result
        try:
            return PokemonRecord.from_api(result.data)
        except (ValidationError, AttributeError, TypeError) as exc:
            return _failure(f"Failed to parse API response: {exc}", kind=FailureKind.PARSE_ERROR)

    def fetch_sprite(self, url: str) -> SpriteAsset:
        """Download a sprite image and base64-encode it.

        Args:
            url: Absolute sprite URL taken from a Pokemon record.

        Returns:
            The downloaded sprite.

        Raises:
            requests.RequestException: If the download fails or returns non-2xx.
        """
        logger.debug("GET sprite %s", url)
        response = requests.get(url)
        response.raise_for_status()
        return SpriteAsset.from_bytes(response.content)


def _failure(message: str, status: Optional[str] = None, kind: FailureKind = FailureKind.UNEXPECTED) -> FetchFailure:
    """Log a failed fetch and wrap it as a FetchFailure.

    Args:
        message: Caller-facing error text.
        status: HTTP status code as a string, when a response was received.
        kind: Failure category.

    Returns:
        The failure value returned to callers in place of an exception.
    """
    logger.warning("PokeAPI fetch failed (%s): %s", kind.value, message)
    return FetchFailure(message=message, status=status, kind=kind)
