"""Pokemon formatting helpers used by MCP tool and resource wrappers."""

from __future__ import annotations

import logging
import random
from typing import Optional

from .api import PokeAPIClient
from .models import FetchFailure, RecordResult, SpriteError, SpritePayload

logger = logging.getLogger(__name__)


def format_text(client: PokeAPIClient, result: RecordResult) -> str:
    """Render a Pokemon as a plain-text block with an inline sprite.

    Args:
        client: Client used to download the sprite image.
        result: Loaded record, or the failure from loading it.

    Returns:
        Five labeled lines (ID, Name, Height, Weight, Types), followed by a
        Markdown image line when a sprite exists. Failures are returned as
        their message, unchanged.
    """
    if isinstance(result, FetchFailure):
        return result.message

    image_markdown = ""
    if result.sprite_url:
        # A broken sprite should not cost the caller the text fields.
        try:
            sprite = client.fetch_sprite(result.sprite_url)
            image_markdown = "\n" + sprite.markdown(result.name)
        except Exception as exc:
            logger.warning("Sprite fetch failed for %s: %s", result.name, exc)
            image_markdown = f"\nImage Error: {exc}"

    return (
        f"ID: {result.id}\n"
        f"Name: {result.name.capitalize()}\n"
        f"Height: {result.height}\n"
        f"Weight: {result.weight}\n"
        f"Types: {', '.join(result.types)}{image_markdown}\n"
    )


def format_sprite_json(client: PokeAPIClient, result: RecordResult, name_or_id: str) -> str:
    """Return the sprite as a JSON document with base64 data.

    Args:
        client: Client used to download the sprite image.
        result: Loaded record, or the failure from loading it.
        name_or_id: Identifier the caller asked for, echoed in error messages.

    Returns:
        JSON-encoded SpritePayload, or a SpriteError with only an ``error`` key.
    """
    if isinstance(result, FetchFailure):
        return SpriteError(error=f"Pokemon data not found: {result.message}").model_dump_json()

    if not result.sprite_url:
        return SpriteError(error=f"Sprite not available for {name_or_id}").model_dump_json()

    try:
        sprite = client.fetch_sprite(result.sprite_url)
    except Exception as exc:
        logger.warning("Sprite encoding failed for %s: %s", result.name, exc)
        return SpriteError(error=f"Failed to encode sprite: {exc}").model_dump_json()

    return SpritePayload(
        name=result.name,
        id=result.id,
        url=result.sprite_url,
        base64_data=sprite.encoded_base64,
        content_type=sprite.content_type,
        markdown=sprite.markdown(result.name),
    ).model_dump_json()


def sprite_url_only(result: RecordResult, name_or_id: str) -> str:
    """Return the raw sprite URL without downloading the image."""
    if isinstance(result, FetchFailure):
        return f"Error fetching Pokemon data: {result.message}"
    if result.sprite_url:
        return result.sprite_url
    return f"Sprite not available for {name_or_id}"


def random_pokemon_id(max_id: int, rng: Optional[random.Random] = None) -> int:
    """Pick a national dex number uniformly from ``[1, max_id]``."""
    return (rng or random).randint(1, max_id)
