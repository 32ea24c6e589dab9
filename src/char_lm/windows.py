from __future__ import annotations

from typing import Iterator


def char_windows(text: str, window_length: int) -> Iterator[tuple[str, str]]:
    """Yield (context, next_char) for every window of `window_length` chars in `text`."""

    if window_length <= 0:
        raise ValueError("window_length must be >= 1")
    for i in range(0, max(0, len(text) - window_length)):
        yield text[i : i + window_length], text[i + window_length]


def trailing_window(text: str, window_length: int) -> str:
    """The last `window_length` characters of `text`."""

    return text[max(0, len(text) - window_length) :]
