"""Pseudonymous nickname generation for company-path accounts.

``nickname_candidates`` yields ``adjective_noun_NNNN`` forever; the caller
checks uniqueness. After a bounded number of collisions ``allocate_nickname``
falls back to a time-derived suffix.
"""

import random
import time
from collections.abc import Awaitable, Callable, Iterator

ADJECTIVES: tuple[str, ...] = (
    "brave", "calm", "clever", "cool", "curious", "eager", "fast", "fierce",
    "gentle", "happy", "honest", "kind", "lazy", "lucky", "mighty", "noble",
    "proud", "quick", "quiet", "sharp", "shy", "silent", "smart", "smooth",
    "soft", "swift", "tall", "tiny", "warm", "wild", "wise", "witty",
    "bright", "bold", "golden", "silver", "cosmic", "mystic", "epic", "royal",
)  # fmt: skip

NOUNS: tuple[str, ...] = (
    "bear", "bird", "cat", "deer", "dog", "eagle", "falcon", "fox",
    "hawk", "horse", "lion", "owl", "panda", "rabbit", "raven", "shark",
    "tiger", "whale", "wolf", "zebra", "dragon", "phoenix", "unicorn", "griffin",
    "koala", "dolphin", "penguin", "turtle", "otter", "beaver", "lynx", "cobra",
)  # fmt: skip

_system_random = random.SystemRandom()


def nickname_candidates(rng: random.Random | None = None) -> Iterator[str]:
    """Yield ``adjective_noun_NNNN`` candidates (NNNN in 1000-9999).

    Args:
        rng: Random source (a seeded ``random.Random`` in tests).
    """
    rng = rng or _system_random
    while True:
        yield f"{rng.choice(ADJECTIVES)}_{rng.choice(NOUNS)}_{rng.randint(1000, 9999)}"


def fallback_nickname(candidate: str, now_ms: int | None = None) -> str:
    """Replace the numeric suffix of ``candidate`` with ``epoch_ms % 10000``.

    Example:
        >>> fallback_nickname("brave_fox_1234", now_ms=1_700_000_004_321)
        'brave_fox_4321'
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    prefix = "_".join(candidate.split("_")[:2])
    return f"{prefix}_{now_ms % 10000}"


async def allocate_nickname(
    is_taken: Callable[[str], Awaitable[bool]],
    *,
    max_attempts: int = 10,
    candidates: Iterator[str] | None = None,
) -> str:
    """Draw candidates until one is free, up to ``max_attempts``.

    Args:
        is_taken: Async uniqueness check.
        max_attempts: Candidates tried before the time-suffix fallback.
        candidates: Candidate source (defaults to ``nickname_candidates()``).

    Returns:
        A free candidate, or the fallback derived from the last candidate.
        The fallback is not re-checked; it is unlikely, not guaranteed, to
        be unique, and a collision surfaces as a uniqueness error on insert.
    """
    candidates = candidates or nickname_candidates()
    candidate = next(candidates)
    for attempt in range(1, max_attempts + 1):
        if not await is_taken(candidate):
            return candidate
        if attempt < max_attempts:
            candidate = next(candidates)
    return fallback_nickname(candidate)
