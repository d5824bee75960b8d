import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

import requests
import spotipy
from spotipy.exceptions import SpotifyException

from utils.config import SPOTIFY_API_BASE_URL, SPOTIFY_REQUESTS_TIMEOUT

logger = logging.getLogger(__name__)

UNKNOWN_ARTIST = "Unknown Artist"

Playlist = Dict[str, Any]


@dataclass(frozen=True)
class TrackSummary:
    name: str
    artist: str

    def as_dict(self) -> Dict[str, str]:
        return {"name": self.name, "artist": self.artist}


@dataclass(frozen=True)
class FetchResult:
    """Resultado de una llamada a Spotify: los items, o el motivo del fallo"""

    items: List[Any] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def get_spotify_client(access_token, *, base_url=SPOTIFY_API_BASE_URL, timeout=SPOTIFY_REQUESTS_TIMEOUT):
    sp = spotipy.Spotify(
        auth=access_token,
        requests_timeout=timeout,
        retries=0,
        status_retries=0,
    )
    sp.prefix = base_url.rstrip("/") + "/"
    return sp


def get_playlists_page(sp):
    return sp._get("me/playlists")


def get_playlist_tracks_page(sp, playlist_id):
    # * GET /playlists/{id}/tracks SIN additional_types: solo tracks, primera pagina
    return sp._get(f"playlists/{sp._get_id('playlist', playlist_id)}/tracks")


def extract_artist_names(artists) -> str:
    if not artists:
        return UNKNOWN_ARTIST
    # * LOS ARTISTAS SIN NOMBRE SE OMITEN
    names = [a["name"] for a in artists if isinstance(a, dict) and isinstance(a.get("name"), str)]
    return ", ".join(names) if names else UNKNOWN_ARTIST


def parse_tracks(response) -> List[TrackSummary]:
    tracks = []
    if not isinstance(response, dict) or not isinstance(response.get("items"), list):
        return tracks

    for item in response["items"]:
        track = item.get("track") if isinstance(item, dict) else None
        if not isinstance(track, dict):
            continue
        # * LOS EPISODIOS DE PODCAST NO SON TRACKS
        if track.get("type", "track") != "track":
            continue
        tracks.append(TrackSummary(
            name=track.get("name") or "",
            artist=extract_artist_names(track.get("artists")),
        ))
    return tracks


class PlaylistFetcher:
    """Lee las playlists del usuario del token y los tracks de una playlist.

    Solo se lee la primera pagina de cada listado. Los errores de Spotify no
    se propagan: ``fetch_*`` los devuelve en ``FetchResult.error`` y ``get_*``
    los convierte en una lista vacia.
    """

    def __init__(
        self,
        client_factory: Callable[..., Any] = get_spotify_client,
        *,
        base_url: str = SPOTIFY_API_BASE_URL,
        timeout: float = SPOTIFY_REQUESTS_TIMEOUT,
    ):
        self.client_factory = client_factory
        self.base_url = base_url
        self.timeout = timeout

    def _client(self, access_token):
        return self.client_factory(access_token, base_url=self.base_url, timeout=self.timeout)

    def fetch_playlists(self, access_token: str) -> FetchResult:
        try:
            response = get_playlists_page(self._client(access_token))
        except (SpotifyException, requests.exceptions.RequestException) as e:
            logger.error("Error fetching playlists: %s", e)
            return FetchResult(error=str(e))

        if not isinstance(response, dict) or not isinstance(response.get("items"), list):
            return FetchResult()
        return FetchResult(items=response["items"])

    def fetch_playlist_tracks(self, playlist_id: str, access_token: str) -> FetchResult:
        if not playlist_id or not playlist_id.strip():
            logger.error("Error fetching playlist tracks: empty playlist id")
            return FetchResult(error="empty playlist id")

        try:
            response = get_playlist_tracks_page(self._client(access_token), playlist_id)
        except (SpotifyException, requests.exceptions.RequestException) as e:
            logger.error("Error fetching playlist tracks: %s", e)
            return FetchResult(error=str(e))

        return FetchResult(items=parse_tracks(response))

    def get_playlists(self, access_token: str) -> List[Playlist]:
        return self.fetch_playlists(access_token).items

    def get_playlist_tracks(self, playlist_id: str, access_token: str) -> List[TrackSummary]:
        return self.fetch_playlist_tracks(playlist_id, access_token).items
