from __future__ import annotations

import logging
import re
import unicodedata
from dataclasses import dataclass
from pathlib import Path

import regex  # type: ignore

logger = logging.getLogger(__name__)

_NEWLINE_RE = re.compile(r"\r\n?")
_WHITESPACE_RE = re.compile(r"[ \t\f\v]+")


@dataclass(frozen=True)
class CorpusConfig:
    lowercase: bool = False
    strip_accents: bool = False
    normalize_newlines: bool = True
    collapse_whitespace: bool = False


def normalize_corpus(text: str, config: CorpusConfig | None = None) -> str:
    """Light, character-preserving normalization of a training corpus.

    Defaults only unify line endings so the model does not learn "\\r".
    """

    cfg = config or CorpusConfig()
    s = text

    if cfg.normalize_newlines:
        s = _NEWLINE_RE.sub("\n", s)

    if cfg.lowercase:
        s = s.lower()

    if cfg.strip_accents:
        # NFKD then drop combining marks
        s = regex.sub(r"\p{Mn}+", "", unicodedata.normalize("NFKD", s))

    if cfg.collapse_whitespace:
        # Runs of spaces/tabs only; newlines are kept
        s = _WHITESPACE_RE.sub(" ", s)

    return s


def load_corpus(path: str | Path, config: CorpusConfig | None = None, encoding: str = "utf-8") -> str:
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"Corpus file not found: {p}")
    text = p.read_text(encoding=encoding)
    logger.info(f"Loaded corpus {p} ({len(text)} characters)")
    return normalize_corpus(text, config)
