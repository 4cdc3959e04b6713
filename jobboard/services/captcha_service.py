"""Arithmetic proof-of-human for the posting form.

The pair (a, b) travels with the submission and is not held server-side, so
this only deters naive bots. It is not a security boundary.
"""
import random
from typing import Any

from jobboard.config import settings


def generate(rng: random.Random | None = None) -> tuple[int, int]:
    rng = rng or random
    a = rng.randint(settings.captcha_min, settings.captcha_max)
    b = rng.randint(settings.captcha_min, settings.captcha_max)
    return a, b


def verify(a: int, b: int, claimed: Any) -> bool:
    """Any answer that is not a whole number equal to a + b is wrong."""
    if isinstance(claimed, bool):
        return False
    if isinstance(claimed, str):
        try:
            claimed = int(claimed.strip())
        except ValueError:
            return False
    if isinstance(claimed, float) and claimed.is_integer():
        claimed = int(claimed)
    if not isinstance(claimed, int):
        return False
    return claimed == a + b


def question(a: int, b: int) -> str:
    return f"What is {a} + {b}?"
