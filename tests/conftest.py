import json
from typing import Any, Callable, Dict, List, Optional, Union

import pytest
import requests

import pokeapi_mcp.api as api
import pokeapi_mcp.server as server
from pokeapi_mcp.config import Settings

TEST_API_BASE = "https://pokeapi.test/api/v2"


class StubResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(
        self,
        status_code: int = 200,
        payload: Any = None,
        content: Optional[bytes] = None,
        reason: str = "OK",
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        if content is None:
            content = json.dumps(payload).encode("utf-8") if payload is not None else b""
        self.content = content

    def json(self) -> Any:
        return json.loads(self.content)

    def raise_for_status(self) -> None:
        # Same threshold as requests: only 4xx and 5xx raise.
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error: {self.reason}", response=self)


def build_pokemon_payload(
    dex: int,
    name: str,
    types: List[str],
    height: int,
    weight: int,
    sprite: Optional[str],
) -> Dict[str, Any]:
    return {
        "id": dex,
        "name": name,
        "height": height,
        "weight": weight,
        "base_experience": 112,
        "types": [
            {"slot": slot, "type": {"name": type_name, "url": f"{TEST_API_BASE}/type/{type_name}/"}}
            for slot, type_name in enumerate(types, start=1)
        ],
        "sprites": {"front_default": sprite, "back_default": None},
    }


class FakeUpstream:
    """Routes requests.get calls to canned responses and records every URL."""

    base = TEST_API_BASE

    def __init__(self) -> None:
        self.routes: Dict[str, Union[StubResponse, Callable[[], StubResponse]]] = {}
        self.calls: List[str] = []
        # Stand-in PNG payloads keyed by Pokemon name; only the bytes matter to the encoders.
        self.sprite_bytes: Dict[str, bytes] = {}

    def api_url(self, path: str) -> str:
        return f"{self.base}/{path}"

    def respond(self, url: str, **response_kwargs: Any) -> None:
        """Serve a StubResponse built from the keyword arguments."""
        self.routes[url] = StubResponse(**response_kwargs)

    def fail(self, url: str, error: Exception) -> None:
        """Raise ``error`` whenever ``url`` is requested."""

        def raise_error() -> StubResponse:
            raise error

        self.routes[url] = raise_error

    def add_pokemon(self, payload: Dict[str, Any], sprite: Optional[bytes] = None) -> None:
        response = StubResponse(payload=payload)
        self.routes[self.api_url(f"pokemon/{payload['id']}")] = response
        self.routes[self.api_url(f"pokemon/{payload['name']}")] = response
        sprite_url = payload["sprites"]["front_default"]
        if sprite_url and sprite is not None:
            self.sprite_bytes[payload["name"]] = sprite
            self.respond(sprite_url, content=sprite)

    def image_calls(self) -> List[str]:
        return [url for url in self.calls if not url.startswith(self.base)]

    def get(self, url: str, *args: Any, **kwargs: Any) -> StubResponse:
        self.calls.append(url)
        if url not in self.routes:
            if url.startswith(self.api_url("pokemon/")):
                return StubResponse(status_code=404, content=b"Not Found", reason="Not Found")
            raise AssertionError(f"Unexpected URL {url} requested")
        route = self.routes[url]
        return route() if callable(route) else route


@pytest.fixture
def pokemon_payload() -> Callable[..., Dict[str, Any]]:
    """Expose the payload builder for tests that need raw PokeAPI JSON."""
    return build_pokemon_payload


@pytest.fixture
def settings() -> Settings:
    return Settings(api_base=TEST_API_BASE)


@pytest.fixture
def client(settings: Settings) -> api.PokeAPIClient:
    return api.PokeAPIClient(settings)


@pytest.fixture(autouse=True)
def upstream(monkeypatch: pytest.MonkeyPatch, client: api.PokeAPIClient) -> FakeUpstream:
    fake = FakeUpstream()
    fake.add_pokemon(
        build_pokemon_payload(25, "pikachu", ["electric"], 4, 60, "https://img.test/sprites/25.png"),
        sprite=b"\x89PNG\r\n\x1a\npikachu-front-default",
    )
    fake.add_pokemon(
        build_pokemon_payload(
            445, "garchomp", ["dragon", "ground"], 19, 950, "https://img.test/sprites/445.png"
        ),
        sprite=b"\x89PNG\r\n\x1a\ngarchomp-front-default\x00\xff",
    )
    # Some alternate forms ship without a front sprite.
    fake.add_pokemon(build_pokemon_payload(10094, "pikachu-original-cap", ["electric"], 4, 60, None))

    monkeypatch.setattr(api.requests, "get", fake.get)
    # Point the MCP wrappers at the fake upstream as well.
    monkeypatch.setattr(server, "client", client)
    return fake
