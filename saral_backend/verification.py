"""
Simulated document verification.

There is no OCR or KYC check behind uploads; a coin flip decides whether a
document counts as verified. Workflow functions take the verifier as a
parameter so a real verification step can replace this one.
"""

import random
from typing import Callable, Optional

from saral_backend.config import AUTO_VERIFY_THRESHOLD

DocumentVerifier = Callable[[], bool]

_simulation_rng = random.Random()


def simulate_verification(rng: Optional[random.Random] = None) -> bool:
    """Auto-verify roughly 70% of uploads (random() > threshold)."""
    source = rng or _simulation_rng
    return source.random() > AUTO_VERIFY_THRESHOLD
