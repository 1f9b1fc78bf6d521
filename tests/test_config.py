from markov_text.config import Settings
from markov_text.core.corpus import sanitize


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MARKOV_WINDOW_LENGTH", "5")
    monkeypatch.setenv("MARKOV_STRIP_CR", "false")
    s = Settings()
    assert s.window_length == 5 and s.strip_cr is False
    assert s.seed == 20

def test_sanitize():
    assert sanitize("a\r\nb\r") == "a\nb"
    assert sanitize("a\r\nb", strip_cr=False) == "a\r\nb"
