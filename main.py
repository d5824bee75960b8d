import logging
import sys

from services.spotify_service import PlaylistFetcher
from utils.config import LOG_LEVEL, SPOTIFY_ACCESS_TOKEN
from utils.utils import configure_logging


def main(access_token=None, fetcher=None):
    access_token = access_token or SPOTIFY_ACCESS_TOKEN
    if not access_token:
        print("⚠️ Falta SPOTIFY_ACCESS_TOKEN en el entorno o en .env")
        return 1

    fetcher = fetcher or PlaylistFetcher()
    result = fetcher.fetch_playlists(access_token)
    if not result.ok:
        print(f"⚠️ No se pudieron obtener las playlists: {result.error}")
        return 1

    # ---------- LISTADO ----------
    for playlist in result.items:
        if not isinstance(playlist, dict):
            continue
        print(f"\n🎵 {playlist.get('name')}")
        for t in fetcher.get_playlist_tracks(playlist.get("id") or "", access_token):
            print(f"  {t.name} - {t.artist}")
    return 0


if __name__ == "__main__":
    configure_logging(level=getattr(logging, LOG_LEVEL, logging.INFO))
    sys.exit(main())
