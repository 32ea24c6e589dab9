"""
Character-level sliding-window language model.

Training scans a corpus with a window of W characters and counts, for every
context, which character came next. Generation starts from a seed text and
repeatedly samples the distribution of the trailing W characters of the
output so far.

Usage:
    model = LanguageModel(ModelConfig(window_length=2, seed=20))
    model.train("abcabcabc")
    model.generate("ab", 7)   # -> "abcabca"
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional

import numpy as np

from .config import ModelConfig
from .corpus import CorpusConfig, load_corpus
from .distribution import ContextDistribution
from .windows import char_windows, trailing_window

logger = logging.getLogger(__name__)


class LanguageModel:
    """
    Maps every context of length `window_length` to a ContextDistribution.

    The model only grows: training adds contexts and counts, generation
    reads them. Seeded models produce identical text for identical calls.
    """

    def __init__(self, config: ModelConfig | None = None) -> None:
        self.config = config or ModelConfig()
        self._window_length = int(self.config.window_length)
        self._contexts: Dict[str, ContextDistribution] = {}
        self._rng = np.random.default_rng(self.config.seed)

    @property
    def window_length(self) -> int:
        return self._window_length

    def __len__(self) -> int:
        return len(self._contexts)

    def __contains__(self, context: object) -> bool:
        return context in self._contexts

    def __iter__(self) -> Iterator[str]:
        return iter(self._contexts)

    def __str__(self) -> str:
        return "".join(f"{ctx} : {dist}\n" for ctx, dist in self._contexts.items())

    # ------------- training -------------

    def train(self, corpus_text: str) -> None:
        """Accumulate next-character counts for every window of the corpus."""
        touched: Dict[str, ContextDistribution] = {}
        n_windows = 0
        for context, nxt in char_windows(corpus_text, self._window_length):
            dist = self._contexts.get(context)
            if dist is None:
                dist = ContextDistribution()
                self._contexts[context] = dist
            dist.record_occurrence(nxt)
            touched[context] = dist
            n_windows += 1

        # Once per touched context; same result as recomputing after each update
        for dist in touched.values():
            dist.recompute_probabilities()

        logger.info(
            f"Trained on {n_windows} windows ({len(touched)} contexts updated, "
            f"{len(self._contexts)} total)"
        )

    def train_file(self, path: str | Path, corpus_config: CorpusConfig | None = None) -> None:
        self.train(load_corpus(path, corpus_config))

    # ------------- generation -------------

    def random_char(self, distribution: ContextDistribution) -> str:
        """Draw one character from `distribution` using the model's random source."""
        return distribution.sample(float(self._rng.random()))

    def generate(self, seed_text: str, target_length: int) -> str:
        """
        Extend `seed_text` one sampled character at a time.

        Args:
            seed_text: Initial text; must be at least `window_length` long
            target_length: Length at which generation stops

        Returns:
            The generated text. Shorter than `target_length` when the trailing
            window of the output is not a known context.
        """
        if len(seed_text) < self._window_length:
            raise ValueError(
                f"seed_text must be at least {self._window_length} characters, "
                f"got {len(seed_text)}"
            )

        out: List[str] = list(seed_text)
        context = trailing_window(seed_text, self._window_length)
        while len(out) < target_length:
            dist = self._contexts.get(context)
            if dist is None:
                logger.debug(f"Unknown context {context!r}; stopping at {len(out)} characters")
                break
            nxt = self.random_char(dist)
            out.append(nxt)
            context = trailing_window(context + nxt, self._window_length)

        return "".join(out)

    # ------------- introspection -------------

    def contexts(self) -> List[str]:
        return list(self._contexts)

    def distribution(self, context: str) -> Optional[ContextDistribution]:
        return self._contexts.get(context)

    def count_table(self) -> Dict[str, Dict[str, int]]:
        """Snapshot of counts as {context: {character: count}}."""
        return {
            ctx: {rec.character: rec.count for rec in dist}
            for ctx, dist in self._contexts.items()
        }
