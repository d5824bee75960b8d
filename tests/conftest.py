"""Fixtures compartidos: cliente spotipy falso y payloads capturados."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from services.spotify_service import PlaylistFetcher

FIXTURES = Path(__file__).resolve().parent / "data" / "spotify"


def load_fixture(name):
    return json.loads((FIXTURES / name).read_text())


class FakeSpotipyClient:
    def __init__(self, playlists=None, tracks=None, error=None):
        self._playlists = playlists
        self._tracks = tracks
        self._error = error
        self.calls = []

    def _get_id(self, type, id):
        return id.split(":")[-1]

    def _get(self, url):
        self.calls.append(("GET", url))
        if self._error is not None:
            raise self._error
        if url == "me/playlists":
            return self._playlists
        return self._tracks


@pytest.fixture
def make_fetcher():
    """Devuelve (fetcher, cliente falso, llamadas a la factory)."""

    def factory(**kwargs):
        client = FakeSpotipyClient(**kwargs)
        created = []

        def client_factory(access_token, *, base_url, timeout):
            created.append((access_token, base_url, timeout))
            return client

        return PlaylistFetcher(client_factory, base_url="https://api.test/v1", timeout=2.0), client, created

    return factory


@pytest.fixture
def playlist_tracks_payload():
    return load_fixture("playlist_tracks_raw.json")
