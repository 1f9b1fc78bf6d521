import logging
import random
from dataclasses import asdict

from markov_text.analytics import sampling
from markov_text.analytics.markov import LanguageModel
from markov_text.config import settings

logger = logging.getLogger(__name__)

_model: LanguageModel | None = None


def build_model(window_length: int, mode: str, corpus_path: str, strip_cr: bool | None = None) -> LanguageModel:
    # "random" -> unseeded; anything else -> fixed seed
    if mode == "random":
        lm = LanguageModel(window_length)
    else:
        lm = LanguageModel(window_length, settings.seed)
    lm.train(corpus_path,
             strip_cr=settings.strip_cr if strip_cr is None else strip_cr,
             encoding=settings.encoding)
    return lm


def load_model(path: str | None = None, window_length: int | None = None) -> LanguageModel:
    global _model
    path = path or settings.corpus_path
    if not path:
        raise ValueError("no corpus path configured")
    _model = build_model(settings.window_length if window_length is None else window_length, "seeded", path)
    logger.info("loaded model from %s", path)
    return _model


def get_model() -> LanguageModel | None:
    return _model


def reset_model():
    global _model
    _model = None


def generate_text(model: LanguageModel, initial_text: str, text_length: int, seed: int | None = None) -> str:
    if seed is None:
        return model.generate(initial_text, text_length)
    # per-request source leaves the shared model's own rng untouched
    rng = random.Random(seed)
    return sampling.generate(model.store, model.window_length, initial_text, text_length, rng.random)


def get_stats(model: LanguageModel) -> dict:
    return asdict(model.stats())
