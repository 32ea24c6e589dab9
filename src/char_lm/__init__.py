"""Character-level sliding-window language model.

Import from this package in the scripts under `scripts/`.
"""

from .config import ConfigurationError, ModelConfig
from .distribution import CharRecord, ContextDistribution, IndexOutOfRange
from .model import LanguageModel

__version__ = "1.0.0"

__all__ = [
    "CharRecord",
    "ConfigurationError",
    "ContextDistribution",
    "IndexOutOfRange",
    "LanguageModel",
    "ModelConfig",
]
