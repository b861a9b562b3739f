from __future__ import annotations

import random
from typing import Optional, Sequence

from .cells import Table
from .rules import SAMPLE_MAX, SAMPLE_MIN, SAMPLE_PREFIX


def generate(headers: Sequence[str], row_count: int, rng: Optional[random.Random] = None) -> Table:
    """Build row_count rows of Sample_<100..999> placeholders, one per header."""
    rng = rng or random.Random()
    return [
        {header: f"{SAMPLE_PREFIX}{rng.randint(SAMPLE_MIN, SAMPLE_MAX)}" for header in headers}
        for _ in range(row_count)
    ]
