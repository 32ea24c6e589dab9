"""
Configuration for the character language model.

A model is configured by its window length (the number of preceding
characters used to predict the next one) and an optional seed for the
random source. With a seed, generation is reproducible; without one every
run draws from fresh OS entropy.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Dict, Optional


class ConfigurationError(ValueError):
    """Raised when a model is configured with invalid values."""


@dataclass(frozen=True)
class ModelConfig:
    """
    Construction-time options for a LanguageModel.

    Attributes:
        window_length: Number of preceding characters that form a context
        seed: Seed for the random source, or None for non-reproducible runs
    """

    window_length: int = 3
    seed: Optional[int] = None

    def __post_init__(self):
        # bool is an int subclass; reject it explicitly
        if isinstance(self.window_length, bool) or not isinstance(self.window_length, numbers.Integral):
            raise ConfigurationError(
                f"window_length must be an int, got {type(self.window_length).__name__}"
            )
        if self.window_length <= 0:
            raise ConfigurationError(f"window_length must be >= 1, got {self.window_length}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, numbers.Integral)):
            raise ConfigurationError(f"seed must be an int or None, got {self.seed!r}")

    @property
    def seeded(self) -> bool:
        return self.seed is not None

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'ModelConfig':
        """Create ModelConfig instance from dictionary, ignoring unknown keys."""
        return cls(**{k: v for k, v in config_dict.items() if k in cls.__annotations__})

    def to_dict(self) -> Dict:
        """Convert ModelConfig to dictionary."""
        return {
            'window_length': self.window_length,
            'seed': self.seed,
        }
