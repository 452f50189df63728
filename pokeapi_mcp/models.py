"""Pydantic models for PokeAPI records, fetch results, and sprite payloads."""

from __future__ import annotations

import base64
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# --- Pokemon record ---


class PokemonRecord(BaseModel):
    """Fields read from a ``pokemon/{name_or_id}`` response."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="National Pokedex number")
    name: str
    height: int = Field(description="Height in decimeters (as provided by API)")
    weight: int = Field(description="Weight in hectograms (as provided by API)")
    types: List[str] = Field(description="Type names in slot order")
    sprite_url: Optional[str] = Field(
        default=None,
        description="Front default sprite URL (None if unavailable)",
    )

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "PokemonRecord":
        """Build a record from the raw PokeAPI payload.

        Args:
            data: Decoded JSON object for a single Pokemon.

        Returns:
            Validated Pokemon record.

        Raises:
            pydantic.ValidationError: If required fields are missing or mistyped.
        """
        sprites = data.get("sprites") or {}
        return cls.model_validate(
            {
                "id": data.get("id"),
                "name": data.get("name"),
                "height": data.get("height"),
                "weight": data.get("weight"),
                # types is a list of {"slot": n, "type": {"name": ..., "url": ...}}
                "types": [(entry.get("type") or {}).get("name") for entry in data.get("types", [])],
                "sprite_url": sprites.get("front_default"),
            }
        )


# --- Fetch results ---


class FailureKind(str, Enum):
    """Category of a failed upstream fetch."""

    NOT_FOUND = "not_found"
    UPSTREAM_ERROR = "upstream_error"
    PARSE_ERROR = "parse_error"
    TRANSPORT_FAULT = "transport_fault"
    UNEXPECTED = "unexpected"


class FetchSuccess(BaseModel):
    """Decoded JSON body of a 2xx response."""

    data: Any


class FetchFailure(BaseModel):
    """Failed fetch described as data rather than an exception."""

    model_config = ConfigDict(frozen=True)

    message: str
    status: Optional[str] = Field(default=None, description="HTTP status code, if any")
    kind: FailureKind = FailureKind.UNEXPECTED


FetchResult = Union[FetchSuccess, FetchFailure]
RecordResult = Union[PokemonRecord, FetchFailure]


# --- Sprite outputs ---


class SpriteAsset(BaseModel):
    """Downloaded sprite image and its base64 encoding."""

    raw_bytes: bytes
    encoded_base64: str
    content_type: str = "image/png"

    @classmethod
    def from_bytes(cls, raw: bytes) -> "SpriteAsset":
        """Wrap raw image bytes together with their base64 encoding.

        Args:
            raw: Image bytes as downloaded.

        Returns:
            Sprite asset tagged as image/png.
        """
        return cls(raw_bytes=raw, encoded_base64=base64.b64encode(raw).decode("ascii"))

    def data_uri(self) -> str:
        """Return the sprite as a ``data:`` URI."""
        return f"data:{self.content_type};base64,{self.encoded_base64}"

    def markdown(self, alt: str) -> str:
        """Return a Markdown image embedding the sprite inline."""
        return f"![{alt}]({self.data_uri()})"


class SpritePayload(BaseModel):
    """Successful ``pokemon_sprite`` response body."""

    name: str
    id: int
    url: str
    base64_data: str
    content_type: str
    markdown: str


class SpriteError(BaseModel):
    """Error body for the ``pokemon_sprite`` tool."""

    error: str
