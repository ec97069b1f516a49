# registry/_suggest.py

from collections.abc import Iterable

from rapidfuzz import fuzz, process, utils


def suggest_keys(
    query: str,
    choices: Iterable[str],
    *,
    limit: int = 3,
    score_cutoff: int = 60,
) -> tuple[str, ...]:
    """
    Rank known keys by fuzzy similarity to an unrecognised key.

    Scores each choice against the query using WRatio after default
    processing (lower-casing, stripping non-alphanumerics), keeping those at
    or above the score cutoff.

    Returns:
        tuple[str, ...]: Up to `limit` choices ordered by descending score.
    """
    matches = process.extract(
        query,
        list(choices),
        scorer=fuzz.WRatio,
        processor=utils.default_process,
        limit=limit,
        score_cutoff=score_cutoff,
    )
    return tuple(choice for choice, _score, _index in matches)
