from dataclasses import dataclass, fields
from enum import Enum
from typing import Mapping, Optional, Protocol


class Platform(Enum):
    SPOTIFY = "spotify"
    YOUTUBE_MUSIC = "youtube_music"

    @property
    def display_name(self) -> str:
        return "Spotify" if self is Platform.SPOTIFY else "YouTube Music"

    @property
    def emoji(self) -> str:
        return "🟢" if self is Platform.SPOTIFY else "🔴"

    @property
    def opposite(self) -> "Platform":
        if self is Platform.SPOTIFY:
            return Platform.YOUTUBE_MUSIC
        return Platform.SPOTIFY


class ItemKind(Enum):
    TRACK = "track"
    ALBUM = "album"


# camelCase keys as produced by JSON catalog payloads
_ALIASES = {
    "imageUrl": "image_url",
    "previewUrl": "preview_url",
    "externalUrl": "external_url",
}


@dataclass(frozen=True)
class SongRecord:
    name: str = ""
    artist: str = ""
    album: str = ""
    id: Optional[str] = None
    image_url: Optional[str] = None
    preview_url: Optional[str] = None
    external_url: Optional[str] = None
    platform: Optional[Platform] = None

    @classmethod
    def from_mapping(cls, data: Mapping) -> "SongRecord":
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            key = _ALIASES.get(key, key)
            if key in known:
                kwargs[key] = value
        platform = kwargs.get("platform")
        if isinstance(platform, str):
            try:
                kwargs["platform"] = Platform(platform)
            except ValueError:
                kwargs["platform"] = None
        return cls(**kwargs)


@dataclass(frozen=True)
class MatchResult(SongRecord):
    match_score: int = 0

    @classmethod
    def from_song(cls, song, score: int) -> "MatchResult":
        if isinstance(song, Mapping):
            song = SongRecord.from_mapping(song)
        values = {f.name: getattr(song, f.name, f.default) for f in fields(SongRecord)}
        return cls(match_score=score, **values)


@dataclass(frozen=True)
class LinkInfo:
    platform: Platform
    kind: ItemKind
    item_id: str


@dataclass(frozen=True)
class ConversionResult:
    original: SongRecord
    converted: MatchResult
    confidence: str
    source_platform: Platform
    target_platform: Platform


class MusicCatalog(Protocol):
    """Lookup and search operations shared by every catalog client."""

    platform: Platform

    def get_track(self, item_id: str) -> Optional[SongRecord]: ...

    def get_album(self, item_id: str) -> Optional[SongRecord]: ...

    def search_tracks(self, query: str, limit: int = 10) -> list[SongRecord]: ...
