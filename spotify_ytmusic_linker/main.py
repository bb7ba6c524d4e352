import sys

from loguru import logger

from spotify_ytmusic_linker import ui
from spotify_ytmusic_linker.config import ConfigError, load_settings
from spotify_ytmusic_linker.converter import (
    ConverterService,
    conversion_result,
    format_conversion_message,
)
from spotify_ytmusic_linker.logs import setup_logger
from spotify_ytmusic_linker.matching_utils import best_match
from spotify_ytmusic_linker.models import LinkInfo, Platform
from spotify_ytmusic_linker.spotify_client import SpotifyClient
from spotify_ytmusic_linker.ytmusic_client import YtMusicClient


def build_converter(settings):
    return ConverterService(
        {
            Platform.SPOTIFY: SpotifyClient(
                settings.spotify_client_id, settings.spotify_client_secret
            ),
            Platform.YOUTUBE_MUSIC: YtMusicClient(language=settings.ytmusic_language),
        },
        search_limit=settings.search_limit,
    )


def convert_once(converter, link):
    with ui.console.status(
        f"[bold green]Looking up {link.platform.display_name} {link.kind.value}...",
        spinner="dots",
    ):
        original = converter.get_original_song(link)
        if original is not None:
            matches = converter.candidates_for(original, link.platform)

    if original is None:
        ui.show_conversion(format_conversion_message(None), False)
        return

    # ranking is a stable sort, so ties resolve as they would on the raw results
    result = conversion_result(original, best_match(original, matches), link.platform)
    ui.console.print(f"[blue]Original:[/blue] {ui.song_str(original)} ({original.album})")
    ui.show_conversion(format_conversion_message(result), result is not None)
    ui.show_candidates(link.platform.opposite, matches)


def main():
    try:
        settings = load_settings()
    except ConfigError as e:
        ui.console.print(f"[red]{e}[/red]")
        sys.exit(1)

    setup_logger(settings.log_level, settings.log_file)
    logger.debug("Starting with search limit {}", settings.search_limit)
    converter = build_converter(settings)

    try:
        while True:
            platform = ui.ask_source_platform()
            if platform is None:
                raise KeyboardInterrupt
            kind = ui.ask_item_kind()
            item_id = ui.ask_item_id(platform, kind) if kind else None
            if not item_id:
                continue
            convert_once(converter, LinkInfo(platform, kind, item_id))
    except KeyboardInterrupt:
        print("\nExiting...")
        sys.exit(0)


if __name__ == "__main__":
    main()
