import logging
import random

from markov_text.analytics import sampling
from markov_text.analytics.stats import ModelStats, model_stats
from markov_text.analytics.store import ModelStore
from markov_text.core.corpus import read_corpus
from markov_text.core.validation import is_valid_window_length

logger = logging.getLogger(__name__)


class LanguageModel:
    """
    Character-level Markov model over windows of `window_length` characters.

    - seed=None gives a fresh, unseeded random source; an int seed makes
      generation reproducible for the same corpus and inputs.
    - rng overrides seed with any object exposing random() -> float in [0, 1).
    """

    def __init__(self, window_length: int, seed: int | None = None, rng: random.Random | None = None):
        if not is_valid_window_length(window_length):
            raise ValueError(f"window length must be a positive integer, got {window_length!r}")
        self.window_length = window_length
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.store = ModelStore()

    def train(self, path: str, strip_cr: bool = True, encoding: str = "utf-8"):
        """Builds the model from the corpus file at `path`."""
        self.train_text(read_corpus(path, encoding=encoding, strip_cr=strip_cr))

    def train_text(self, text: str):
        k = self.window_length
        # i runs to len(text) - k - 1, so text[-1] is the last follower recorded
        for i in range(len(text) - k):
            self.store.get_or_insert(text[i:i + k]).update(text[i + k])
        for _, table in self.store:
            table.normalize()
        logger.info("trained k=%d on %d chars: %d windows", k, len(text), len(self.store))

    def generate(self, initial_text: str, text_length: int) -> str:
        return sampling.generate(self.store, self.window_length, initial_text, text_length, self.rng.random)

    def stats(self) -> ModelStats:
        return model_stats(self.store, self.window_length)

    def __str__(self) -> str:
        return "".join(f"{window} : {table}\n" for window, table in self.store)
