#!/usr/bin/env python3
"""
Command-line entry point for the character language model.

Trains a model on a corpus file and prints text generated from a seed.

Usage:
    char-lm 7 "Whether" 200 fixed originofspecies.txt      # reproducible
    char-lm 7 "Whether" 200 random originofspecies.txt     # different each run
    char-lm 2 "ab" 20 fixed corpus.txt --dump              # print the model too
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import ConfigurationError, ModelConfig
from .corpus import CorpusConfig
from .model import LanguageModel

logger = logging.getLogger(__name__)

DEFAULT_FIXED_SEED = 20


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="char-lm",
        description="Generate text with a character-level sliding-window language model"
    )

    parser.add_argument("window_length", type=int, help="Number of context characters")
    parser.add_argument("seed_text", type=str, help="Initial text; at least window_length long")
    parser.add_argument("target_length", type=int, help="Length of the text to generate")
    parser.add_argument(
        "mode",
        choices=["fixed", "random"],
        help="'fixed' for reproducible output, 'random' for a fresh run every time"
    )
    parser.add_argument("corpus", type=str, help="Path to the training text file")

    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_FIXED_SEED,
        help=f"Random seed used in fixed mode (default: {DEFAULT_FIXED_SEED})"
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the learned model before the generated text"
    )
    parser.add_argument(
        "--lowercase",
        action="store_true",
        help="Lowercase the corpus before training"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = ModelConfig(
            window_length=args.window_length,
            seed=args.seed if args.mode == "fixed" else None,
        )
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    model = LanguageModel(config)
    try:
        model.train_file(args.corpus, CorpusConfig(lowercase=args.lowercase))
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1

    try:
        text = model.generate(args.seed_text, args.target_length)
    except ValueError as e:
        logger.error(f"Cannot generate: {e}")
        return 2

    if args.dump:
        print(model, end="")
    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
