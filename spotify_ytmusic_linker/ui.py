from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
import questionary

from spotify_ytmusic_linker.matching_utils import confidence_label
from spotify_ytmusic_linker.models import ItemKind, Platform

console = Console()

EXIT = "Exit"
DIRECTIONS = {
    f"{Platform.SPOTIFY.display_name} → {Platform.YOUTUBE_MUSIC.display_name}": Platform.SPOTIFY,
    f"{Platform.YOUTUBE_MUSIC.display_name} → {Platform.SPOTIFY.display_name}": Platform.YOUTUBE_MUSIC,
}
KINDS = {"Track": ItemKind.TRACK, "Album": ItemKind.ALBUM}
ID_PROMPTS = {
    (Platform.SPOTIFY, ItemKind.TRACK): "Spotify track link, URI or id:",
    (Platform.SPOTIFY, ItemKind.ALBUM): "Spotify album link, URI or id:",
    (Platform.YOUTUBE_MUSIC, ItemKind.TRACK): "YouTube Music videoId:",
    (Platform.YOUTUBE_MUSIC, ItemKind.ALBUM): "YouTube Music album browseId:",
}


def song_str(song):
    return f"{song.name} — {song.artist}" if song else "-"


def make_candidates_table(platform):
    t = Table(show_header=True, header_style="bold", expand=True, box=None)
    t.add_column(f"{platform.display_name} Candidate", style="red", overflow="fold", ratio=2)
    t.add_column("Album", style="green", overflow="fold", ratio=1)
    t.add_column("Confidence", style="white", justify="right", no_wrap=True)
    return t


def ask_source_platform():
    choice = questionary.select(
        "What do you want to convert?", list(DIRECTIONS) + [EXIT]
    ).ask()
    if choice is None or choice == EXIT:
        return None
    return DIRECTIONS[choice]


def ask_item_kind():
    choice = questionary.select("Track or album?", list(KINDS)).ask()
    return KINDS.get(choice)


def ask_item_id(platform, kind):
    answer = questionary.text(ID_PROMPTS[(platform, kind)]).ask()
    return answer.strip() if answer else None


def show_conversion(message, success):
    text = Text(message, justify="center")
    console.print(Panel(text, expand=True, style="green" if success else "red"))


def show_candidates(platform, matches, limit=10):
    if not matches:
        console.print(f"[red]No candidates found on {platform.display_name}.[/red]")
        return
    table = make_candidates_table(platform)
    for m in matches[:limit]:
        table.add_row(song_str(m), m.album or "-", confidence_label(m.match_score))
    console.print(table)
