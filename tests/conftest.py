import pytest

from spotify_ytmusic_linker.models import Platform, SongRecord


@pytest.fixture
def imagine():
    return SongRecord(name="Imagine", artist="John Lennon", album="Imagine")


@pytest.fixture
def imagine_candidates():
    return [
        SongRecord(
            id="yt1",
            name="Imagine",
            artist="John Lennon",
            album="The John Lennon Collection",
            platform=Platform.YOUTUBE_MUSIC,
        ),
        SongRecord(
            id="yt2",
            name="Imagine",
            artist="John Lennon",
            album="Imagine",
            external_url="https://music.youtube.com/watch?v=yt2",
            platform=Platform.YOUTUBE_MUSIC,
        ),
        SongRecord(
            id="yt3",
            name="Yesterday",
            artist="The Beatles",
            album="Help!",
            platform=Platform.YOUTUBE_MUSIC,
        ),
    ]
