from __future__ import annotations

import pandas as pd

from .model import LanguageModel

FRAME_COLUMNS = ["context", "character", "count", "probability", "cumulative_probability"]


def model_to_frame(model: LanguageModel) -> pd.DataFrame:
    """One row per (context, character) record, in the model's iteration order."""

    rows = [
        (ctx, rec.character, rec.count, rec.probability, rec.cumulative_probability)
        for ctx in model.contexts()
        for rec in model.distribution(ctx)
    ]
    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    return df.astype({"count": "int64", "probability": "float64", "cumulative_probability": "float64"})
