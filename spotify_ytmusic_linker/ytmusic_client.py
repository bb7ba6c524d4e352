from loguru import logger
from requests import RequestException
from ytmusicapi import YTMusic
from ytmusicapi.exceptions import YTMusicError

from spotify_ytmusic_linker.models import Platform, SongRecord

WATCH_URL = "https://music.youtube.com/watch?v={}"
BROWSE_URL = "https://music.youtube.com/browse/{}"


def _largest_thumbnail(item):
    # ytmusicapi lists thumbnails smallest first
    thumbnails = item.get("thumbnails") or item.get("thumbnail") or []
    return thumbnails[-1]["url"] if thumbnails else None


def _first_artist(item):
    artists = item.get("artists") or []
    return artists[0]["name"] if artists else "Unknown Artist"


def song_from_track(item: dict) -> SongRecord:
    album = item.get("album") or {}
    video_id = item.get("videoId")
    return SongRecord(
        id=video_id,
        name=item.get("title") or "",
        artist=_first_artist(item),
        album=album.get("name") or "",
        image_url=_largest_thumbnail(item),
        external_url=WATCH_URL.format(video_id) if video_id else None,
        platform=Platform.YOUTUBE_MUSIC,
    )


def song_from_album(album: dict, browse_id: str) -> SongRecord:
    return SongRecord(
        id=browse_id,
        name=album.get("title") or "",
        artist=_first_artist(album),
        album=album.get("title") or "",
        image_url=_largest_thumbnail(album),
        external_url=BROWSE_URL.format(browse_id),
        platform=Platform.YOUTUBE_MUSIC,
    )


class YtMusicClient:
    platform = Platform.YOUTUBE_MUSIC

    def __init__(self, language: str = "en", client=None):
        # search and lookups work without an authenticated session
        self.client = client if client is not None else YTMusic(language=language)

    # ---------------- Lookups ----------------
    def get_track(self, item_id: str):
        """Look up a song by videoId through its watch playlist, which carries the album."""
        try:
            playlist = self.client.get_watch_playlist(videoId=item_id, limit=1)
        except (YTMusicError, RequestException) as e:
            logger.warning("Error fetching YT Music track {}: {}", item_id, e)
            return None
        tracks = (playlist or {}).get("tracks") or []
        if not tracks:
            return None
        return song_from_track(tracks[0])

    def get_album(self, item_id: str):
        try:
            album = self.client.get_album(item_id)
        except (YTMusicError, RequestException) as e:
            logger.warning("Error fetching YT Music album {}: {}", item_id, e)
            return None
        return song_from_album(album, item_id) if album else None

    # ---------------- Search ----------------
    def search_tracks(self, query: str, limit=10):
        try:
            results = self.client.search(query, filter="songs", limit=limit)
        except (YTMusicError, RequestException) as e:
            logger.warning("Error searching YT Music tracks for {!r}: {}", query, e)
            return []
        return [song_from_track(r) for r in results if r.get("videoId")][:limit]
