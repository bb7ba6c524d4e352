import spotipy
from loguru import logger
from requests import RequestException
from spotipy.exceptions import SpotifyBaseException
from spotipy.oauth2 import SpotifyClientCredentials

from spotify_ytmusic_linker.models import Platform, SongRecord


def _first_image(images):
    return images[0]["url"] if images else None


def song_from_track(track: dict) -> SongRecord:
    artists = track.get("artists") or []
    album = track.get("album") or {}
    return SongRecord(
        id=track.get("id"),
        name=track.get("name") or "",
        artist=artists[0]["name"] if artists else "Unknown Artist",
        album=album.get("name") or "Unknown Album",
        image_url=_first_image(album.get("images")),
        preview_url=track.get("preview_url"),
        external_url=(track.get("external_urls") or {}).get("spotify"),
        platform=Platform.SPOTIFY,
    )


def song_from_album(album: dict) -> SongRecord:
    artists = album.get("artists") or []
    return SongRecord(
        id=album.get("id"),
        name=album.get("name") or "",
        artist=artists[0]["name"] if artists else "Unknown Artist",
        album=album.get("name") or "",
        image_url=_first_image(album.get("images")),
        external_url=(album.get("external_urls") or {}).get("spotify"),
        platform=Platform.SPOTIFY,
    )


class SpotifyClient:
    platform = Platform.SPOTIFY

    def __init__(self, client_id: str = "", client_secret: str = "", client=None):
        if client is None:
            # token fetching and refreshing is left to spotipy
            client = spotipy.Spotify(
                auth_manager=SpotifyClientCredentials(
                    client_id=client_id, client_secret=client_secret
                )
            )
        self.client = client

    # ---------------- Lookups ----------------
    def get_track(self, item_id: str):
        """Accepts a track id, URI or open.spotify.com link."""
        try:
            track = self.client.track(item_id)
        except (SpotifyBaseException, RequestException) as e:
            logger.warning("Error fetching Spotify track {}: {}", item_id, e)
            return None
        return song_from_track(track) if track else None

    def get_album(self, item_id: str):
        try:
            album = self.client.album(item_id)
        except (SpotifyBaseException, RequestException) as e:
            logger.warning("Error fetching Spotify album {}: {}", item_id, e)
            return None
        return song_from_album(album) if album else None

    # ---------------- Search ----------------
    def search_tracks(self, query: str, limit=10):
        try:
            results = self.client.search(q=query, type="track", limit=limit)
        except (SpotifyBaseException, RequestException) as e:
            logger.warning("Error searching Spotify tracks for {!r}: {}", query, e)
            return []
        items = (results or {}).get("tracks", {}).get("items") or []
        return [song_from_track(t) for t in items if t]
