"""Human-readable charge numbers, e.g. ``COB-2610-0042``."""

import random
from datetime import date


def generate_charge_number(
    prefix: str = "COB",
    today: date | None = None,
    rng: random.Random | None = None,
) -> str:
    """
    Build ``<prefix>-<YY><MM>-<NNNN>``.

    The four trailing digits are random and zero-padded; they are not
    guaranteed unique, the backend owns uniqueness.
    """
    today = today or date.today()
    rng = rng or random.Random()
    return f"{prefix}-{today:%y%m}-{rng.randrange(10000):04d}"
