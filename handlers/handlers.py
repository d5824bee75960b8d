from services.spotify_service import FetchResult, PlaylistFetcher


class Handlers:
    def __init__(self, fetcher=None):
        self.fetcher = fetcher or PlaylistFetcher()

    # * ---------------- PLAYLISTS ----------------
    def get_playlists(self, access_token: str) -> FetchResult:
        return self.fetcher.fetch_playlists(access_token)

    # * ---------------- TRACKS ----------------
    def get_playlist_tracks(self, playlist_id: str, access_token: str) -> FetchResult:
        result = self.fetcher.fetch_playlist_tracks(playlist_id, access_token)
        return FetchResult(items=[t.as_dict() for t in result.items], error=result.error)
