"""Central configuration dataclass for canonpoly.

Only the polynomial fingerprinting helpers are configurable; the algebra
itself has no tunable state.  The config is a single frozen dataclass so
that fingerprints are reproducible and settings can be passed as one object.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Frozen settings for Schwartz-Zippel fingerprinting.

    Groups:
        Sampling:  m, eval_low, eval_high
        Seeding:   seed
    """
    # --- Sampling ---
    m: int = 16               # number of evaluation points
    eval_low: int = -3        # smallest coordinate value (inclusive)
    eval_high: int = 3        # largest coordinate value (inclusive)

    # --- Seeding ---
    seed: int = 42

    def __post_init__(self):
        if self.m <= 0:
            raise ValueError(f"m must be positive, got {self.m}")
        if self.eval_low > self.eval_high:
            raise ValueError(
                f"eval_low ({self.eval_low}) must not exceed eval_high ({self.eval_high})"
            )

    @property
    def n_values(self) -> int:
        """Number of distinct integers each coordinate is drawn from."""
        return self.eval_high - self.eval_low + 1
