from __future__ import annotations

from char_lm import LanguageModel, ModelConfig
from char_lm.frames import model_to_frame


def main() -> None:
    model = LanguageModel(ModelConfig(window_length=2, seed=42))
    model.train("abracadabra, abracadabra")

    print("DUMP:")
    print(model, end="")

    df = model_to_frame(model)
    print("\nMOST UNCERTAIN CONTEXTS:")
    print(df.groupby("context")["character"].nunique().sort_values(ascending=False).head(5))


if __name__ == "__main__":
    main()
