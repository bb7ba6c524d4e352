from unittest.mock import MagicMock

from ytmusicapi.exceptions import YTMusicServerError

from spotify_ytmusic_linker.models import Platform
from spotify_ytmusic_linker.ytmusic_client import YtMusicClient


SEARCH_RESULT = {
    "videoId": "YkgkThdzX-8",
    "title": "Imagine (Remastered 2010)",
    "artists": [{"name": "John Lennon", "id": "UC1"}],
    "album": {"name": "Imagine", "id": "MPREb_1"},
    "thumbnails": [{"url": "https://lh3/small"}, {"url": "https://lh3/large"}],
}


def make_client():
    api = MagicMock()
    return YtMusicClient(client=api), api


class TestGetTrack:
    """Track lookups through the watch playlist."""

    def test_maps_first_track(self):
        client, api = make_client()
        api.get_watch_playlist.return_value = {
            "tracks": [
                {
                    "videoId": "YkgkThdzX-8",
                    "title": "Imagine",
                    "artists": [{"name": "John Lennon"}],
                    "album": {"name": "Imagine"},
                    "thumbnail": [{"url": "https://lh3/t"}],
                },
                {"videoId": "other", "title": "Jealous Guy"},
            ]
        }

        song = client.get_track("YkgkThdzX-8")

        api.get_watch_playlist.assert_called_once_with(videoId="YkgkThdzX-8", limit=1)
        assert song.id == "YkgkThdzX-8"
        assert song.name == "Imagine"
        assert song.artist == "John Lennon"
        assert song.album == "Imagine"
        assert song.image_url == "https://lh3/t"
        assert song.external_url == "https://music.youtube.com/watch?v=YkgkThdzX-8"
        assert song.platform is Platform.YOUTUBE_MUSIC

    def test_video_without_album(self):
        client, api = make_client()
        api.get_watch_playlist.return_value = {
            "tracks": [{"videoId": "v1", "title": "Live at Budokan", "album": None}]
        }

        song = client.get_track("v1")

        assert song.album == ""
        assert song.artist == "Unknown Artist"

    def test_no_tracks(self):
        client, api = make_client()
        api.get_watch_playlist.return_value = {"tracks": []}

        assert client.get_track("v1") is None

    def test_error_returns_none(self):
        client, api = make_client()
        api.get_watch_playlist.side_effect = YTMusicServerError("Server returned HTTP 400")

        assert client.get_track("v1") is None


class TestGetAlbum:
    """Album page lookups."""

    def test_maps_album(self):
        client, api = make_client()
        api.get_album.return_value = {
            "title": "Imagine",
            "artists": [{"name": "John Lennon"}],
            "thumbnails": [{"url": "https://lh3/a1"}, {"url": "https://lh3/a2"}],
        }

        song = client.get_album("MPREb_1")

        assert song.name == "Imagine"
        assert song.album == "Imagine"
        assert song.image_url == "https://lh3/a2"
        assert song.external_url == "https://music.youtube.com/browse/MPREb_1"

    def test_error_returns_none(self):
        client, api = make_client()
        api.get_album.side_effect = YTMusicServerError("Server returned HTTP 404")

        assert client.get_album("MPREb_x") is None


class TestSearchTracks:
    """Song search."""

    def test_search_skips_results_without_video(self):
        client, api = make_client()
        api.search.return_value = [SEARCH_RESULT, {"title": "Podcast episode"}]

        songs = client.search_tracks("John Lennon Imagine", limit=10)

        api.search.assert_called_once_with("John Lennon Imagine", filter="songs", limit=10)
        assert len(songs) == 1
        song = songs[0]
        assert song.name == "Imagine (Remastered 2010)"
        assert song.album == "Imagine"
        assert song.image_url == "https://lh3/large"

    def test_search_respects_limit(self):
        client, api = make_client()
        api.search.return_value = [SEARCH_RESULT] * 20

        assert len(client.search_tracks("Imagine", limit=3)) == 3

    def test_error_returns_empty_list(self):
        client, api = make_client()
        api.search.side_effect = YTMusicServerError("Server returned HTTP 500")

        assert client.search_tracks("Imagine") == []
