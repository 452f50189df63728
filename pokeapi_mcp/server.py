"""Expose FastMCP tools and resources for PokeAPI lookups."""

from __future__ import annotations

import logging
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from .api import PokeAPIClient
from .config import get_settings
from .logging_config import setup_logging
from .pokemon import (
    format_sprite_json as _format_sprite_json,
    format_text as _format_text,
    random_pokemon_id as _random_pokemon_id,
    sprite_url_only as _sprite_url_only,
)

logger = logging.getLogger(__name__)

# Argument schema shared by every tool.
NameOrId = Annotated[str, Field(description="Pokémon name or ID")]

# Settings are resolved once at import; tests swap ``client`` for one aimed at a fake upstream.
settings = get_settings()
client = PokeAPIClient(settings)

mcp = FastMCP(settings.server_name)


# --- Resources ---


@mcp.resource(
    "pokemon://{name_or_id}",
    name="Pokémon basic information",
    description="Basic data (id, name, height, weight, types) for a given Pokémon",
    mime_type="text/plain",
)
def pokemon_resource(name_or_id: str) -> str:
    """Resolve a Pokemon resource by name or dex number."""
    return _format_text(client, client.load_pokemon(name_or_id))


@mcp.resource(
    "pokemon://random",
    name="Random Pokémon",
    description="Return basic information about a random Pokémon",
    mime_type="text/plain",
)
def random_pokemon_resource() -> str:
    """Resolve a uniformly random Pokemon."""
    random_id = _random_pokemon_id(settings.max_pokemon_id)
    logger.info("Picked random Pokemon id %d", random_id)
    return _format_text(client, client.load_pokemon(random_id))


# --- Tools ---


@mcp.tool()
def pokemon_info(name_or_id: NameOrId) -> str:
    """Retrieve basic information (id, name, height, weight, types) of a Pokémon.

    Args:
        name_or_id: Pokémon name or ID.

    Returns:
        Labeled text block, with the sprite inlined as a base64 Markdown image.
    """
    return _format_text(client, client.load_pokemon(name_or_id))


@mcp.tool()
def pokemon_sprite(name_or_id: NameOrId) -> str:
    """Get the front-default sprite image of a Pokémon, encoded for display.

    Args:
        name_or_id: Pokémon name or ID.

    Returns:
        JSON with name, id, url, base64_data, content_type, and markdown, or
        a JSON object with a single ``error`` key.
    """
    return _format_sprite_json(client, client.load_pokemon(name_or_id), name_or_id)


@mcp.tool()
def pokemon_sprite_url(name_or_id: NameOrId) -> str:
    """Get only the raw URL of a Pokémon sprite without encoding.

    Args:
        name_or_id: Pokémon name or ID.

    Returns:
        Sprite URL, or a message explaining why it is unavailable.
    """
    return _sprite_url_only(client.load_pokemon(name_or_id), name_or_id)


def main() -> None:
    """Run the server over stdio."""
    setup_logging(settings.log_level)
    logger.info("Starting %s MCP server against %s", settings.server_name, settings.api_base)
    mcp.run()


if __name__ == "__main__":
    main()
