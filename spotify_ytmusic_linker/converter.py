from typing import Mapping, Optional

from loguru import logger

from spotify_ytmusic_linker.matching_utils import (
    best_match,
    confidence_label,
    ranked_matches,
)
from spotify_ytmusic_linker.models import (
    ConversionResult,
    ItemKind,
    LinkInfo,
    MatchResult,
    MusicCatalog,
    Platform,
    SongRecord,
)

FALLBACK_MESSAGE = (
    "Sorry, I couldn't convert this music link. "
    "Please make sure it's a valid Spotify or YouTube Music track or album."
)


def search_query(song: SongRecord) -> str:
    return f"{song.artist} {song.name}".strip()


class ConverterService:
    """Converts a track or album from one catalog into its best match on the other."""

    def __init__(self, catalogs: Mapping[Platform, MusicCatalog], search_limit=10):
        self.catalogs = dict(catalogs)
        self.search_limit = search_limit

    def catalog(self, platform: Platform) -> MusicCatalog:
        try:
            return self.catalogs[platform]
        except KeyError:
            raise ValueError(f"No catalog configured for {platform.display_name}") from None

    def get_original_song(self, link: LinkInfo) -> Optional[SongRecord]:
        service = self.catalog(link.platform)
        if link.kind is ItemKind.ALBUM:
            return service.get_album(link.item_id)
        return service.get_track(link.item_id)

    def search_opposite_platform(self, original: SongRecord, source: Platform):
        target = self.catalog(source.opposite)
        return target.search_tracks(search_query(original), self.search_limit)

    def convert_to_opposite_platform(self, original: SongRecord, source: Platform):
        results = self.search_opposite_platform(original, source)
        if not results:
            return None
        return best_match(original, results)

    def candidates_for(self, original: SongRecord, source: Platform):
        """All search results for the original, scored and sorted best-first."""
        return ranked_matches(original, self.search_opposite_platform(original, source))

    def convert(self, link: LinkInfo) -> Optional[ConversionResult]:
        original = self.get_original_song(link)
        if original is None:
            logger.info(
                "Could not fetch original {} {} from {}",
                link.kind.value,
                link.item_id,
                link.platform.display_name,
            )
            return None
        converted = self.convert_to_opposite_platform(original, link.platform)
        return conversion_result(original, converted, link.platform)


def conversion_result(
    original: SongRecord, converted: Optional[MatchResult], source: Platform
) -> Optional[ConversionResult]:
    if converted is None:
        logger.info(
            "No match on {} for search query: {}",
            source.opposite.display_name,
            search_query(original),
        )
        return None
    return ConversionResult(
        original=original,
        converted=converted,
        confidence=confidence_label(converted.match_score),
        source_platform=source,
        target_platform=converted.platform or source.opposite,
    )


def format_conversion_message(result: Optional[ConversionResult]) -> str:
    if result is None:
        logger.debug("No conversion result to format")
        return FALLBACK_MESSAGE

    source, target = result.source_platform, result.target_platform
    header = (
        f"{source.emoji} {source.display_name} → "
        f"{target.emoji} {target.display_name} ({result.confidence})"
    )
    logger.info("Converted: {}, link: {}", header, result.converted.external_url)
    return f"{header}\n{result.converted.external_url}"
