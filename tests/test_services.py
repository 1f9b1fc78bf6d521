import pytest

from markov_text import services
from markov_text.config import settings


def _corpus(tmp_path) -> str:
    p = tmp_path / "corpus.txt"
    p.write_text("abcabcabc", encoding="utf-8")
    return str(p)

def test_load_model_rejects_zero_window(tmp_path):
    services.reset_model()
    with pytest.raises(ValueError):
        services.load_model(_corpus(tmp_path), window_length=0)
    assert services.get_model() is None

def test_load_model_default_window(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "window_length", 2)
    try:
        lm = services.load_model(_corpus(tmp_path))
        assert lm.window_length == 2 and services.get_model() is lm
    finally:
        services.reset_model()

def test_build_model_modes(tmp_path):
    path = _corpus(tmp_path)
    assert services.build_model(2, "seeded", path).seed == settings.seed
    assert services.build_model(2, "random", path).seed is None
