from collections import Counter
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Mapping, Optional

from spotify_ytmusic_linker.models import MatchResult

WEIGHTS = {"name": 0.4, "artist": 0.4, "album": 0.2}
MIN_MATCH_SCORE = 60
EXACT_MATCH_SCORE = 98
LOW_CONFIDENCE_THRESHOLD = 60


def normalize(string) -> str:
    if not string:
        return ""
    string = str(string).lower()
    # only alnum + space
    string = "".join(c for c in string if c.isalnum() or c.isspace())
    return string.strip()


def bigrams(string: str) -> Counter:
    return Counter(string[i : i + 2] for i in range(len(string) - 1))


def similarity(a: str, b: str) -> float:
    """Dice coefficient over the character bigrams of two strings, whitespace ignored.

    Identical strings (even both empty) score 1.0; a string shorter than two
    characters shares no bigrams with anything else and scores 0.0.
    """
    a = "".join(a.split())
    b = "".join(b.split())
    if a == b:
        return 1.0
    if len(a) < 2 or len(b) < 2:
        return 0.0
    hits = sum((bigrams(a) & bigrams(b)).values())
    return 2 * hits / (len(a) + len(b) - 2)


def round_half_up(value: float) -> int:
    # 59.5 -> 60, unlike round() which rounds ties to even
    return int(Decimal(repr(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _field(song, name: str) -> str:
    if isinstance(song, Mapping):
        return normalize(song.get(name))
    return normalize(getattr(song, name, None))


def score_song(original, candidate) -> int:
    """Weighted title/artist/album similarity of two songs, from 0 to 100.

    Either song may be None, a SongRecord or a plain mapping; missing fields
    count as empty strings.
    """
    if original is None or candidate is None:
        return 0
    total = sum(
        weight * similarity(_field(original, name), _field(candidate, name))
        for name, weight in WEIGHTS.items()
    )
    return round_half_up(total * 100)


def confidence_label(score: int) -> str:
    if score >= EXACT_MATCH_SCORE:
        return "Exact match"
    if score >= LOW_CONFIDENCE_THRESHOLD:
        return f"{score}% match"
    return f"{score}% match (low confidence)"


def best_match(original, candidates: Optional[Iterable]) -> Optional[MatchResult]:
    """Return the highest scoring candidate if it reaches MIN_MATCH_SCORE.

    Every candidate is scored; on equal scores the earlier one is kept.
    """
    if not candidates:
        return None
    best_score = 0
    best_candidate = None
    for candidate in candidates:
        score = score_song(original, candidate)
        if score > best_score:
            best_score = score
            best_candidate = candidate
    if best_candidate is None or best_score < MIN_MATCH_SCORE:
        return None
    return MatchResult.from_song(best_candidate, best_score)


def ranked_matches(original, candidates: Optional[Iterable]) -> list[MatchResult]:
    """Return all candidates scored against the original song, sorted best-first"""
    if not candidates:
        return []
    scored = [
        MatchResult.from_song(candidate, score_song(original, candidate))
        for candidate in candidates
        if candidate is not None
    ]
    return sorted(scored, key=lambda m: m.match_score, reverse=True)
