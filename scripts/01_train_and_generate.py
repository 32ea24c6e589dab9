from __future__ import annotations

from char_lm import LanguageModel, ModelConfig


def main() -> None:
    text = (
        "the rain in spain stays mainly in the plain. "
        "in hartford, hereford and hampshire, hurricanes hardly ever happen. "
        "language models learn by counting what comes next. "
    )

    model = LanguageModel(ModelConfig(window_length=4, seed=42))
    model.train(text)
    print(model.generate("the ", 120))


if __name__ == "__main__":
    main()
