# Enable postponed annotations for forward references
from __future__ import annotations

import random
import secrets
import string
import time
from typing import Collection, Optional

USERNAME_PREFIXES = (
    "Awesome",
    "Cool",
    "Great",
    "Super",
    "Interesting",
    "Funny",
    "Curious",
    "Fantastic",
    "Wholesome",
    "Silly",
    "Lame",
    "Smart",
    "Smartest",
    "Pretty",
)

USERNAME_SUFFIXES = (
    "Giraffe",
    "Panda",
    "Lion",
    "Tiger",
    "Bear",
    "Monkey",
    "Elephant",
    "Gorilla",
    "Hippo",
    "Whale",
    "Shark",
    "Dolphin",
    "Penguin",
    "Pig",
    "Cow",
    "Chicken",
    "Dog",
    "Cat",
    "Horse",
    "Puppy",
    "Kitten",
)

ROOM_CODE_ALPHABET = string.ascii_uppercase + string.digits

# How many random draws to try before scanning for a free name
_RANDOM_NAME_ATTEMPTS = 32


# Milliseconds elapsed since a time.perf_counter_ns() reading
def elapsed_ms(started_ns: int, finished_ns: Optional[int] = None) -> int:
    finished_ns = time.perf_counter_ns() if finished_ns is None else finished_ns
    return max(0, (finished_ns - started_ns) // 1_000_000)


# Generate a random short uppercase room code
def generate_room_code(length: int = 10) -> str:
    return "".join(secrets.choice(ROOM_CODE_ALPHABET) for _ in range(length))


def random_username(taken: Collection[str] = ()) -> str:
    """Return a "<Prefix> <Suffix>" name not present in ``taken``.

    Random draws first; once those keep colliding, scan for any free pair and,
    when every pair is in use, number the names ("Cool Panda 2").
    """
    taken = set(taken)
    for _ in range(_RANDOM_NAME_ATTEMPTS):
        name = f"{random.choice(USERNAME_PREFIXES)} {random.choice(USERNAME_SUFFIXES)}"
        if name not in taken:
            return name

    pairs = [f"{prefix} {suffix}" for prefix in USERNAME_PREFIXES for suffix in USERNAME_SUFFIXES]
    free = [name for name in pairs if name not in taken]
    if free:
        return random.choice(free)

    counter = 2
    while True:
        for name in pairs:
            numbered = f"{name} {counter}"
            if numbered not in taken:
                return numbered
        counter += 1
