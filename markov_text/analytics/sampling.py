import logging
from typing import Callable

from markov_text.analytics.store import ModelStore
from markov_text.analytics.table import FrequencyTable

logger = logging.getLogger(__name__)


class EmptyModelError(RuntimeError):
    """Generation needed a window but training recorded none."""


def get_random_char(table: FrequencyTable, draw: Callable[[], float]) -> str:
    # inverse CDF: first record whose cp is strictly above r
    r = draw()
    for cd in table:
        if cd.cp > r:
            return cd.chr
    # r rounded past the last cp
    return table.get(table.size() - 1).chr


def _recover(store: ModelStore, initial_text: str, window_length: int) -> FrequencyTable:
    table = store.get(initial_text[:window_length])
    if table is not None:
        return table
    first = store.first()
    if first is None:
        raise EmptyModelError("model has no windows; the corpus must be longer than the window length")
    logger.debug("initial window %r unknown, falling back to %r", initial_text[:window_length], first[0])
    return first[1]


def generate(store: ModelStore, window_length: int, initial_text: str, text_length: int,
             draw: Callable[[], float]) -> str:
    if len(initial_text) < window_length:
        return initial_text

    out = list(initial_text)
    window = initial_text[-window_length:]
    while len(out) < text_length:
        table = store.get(window)
        if table is None:
            logger.debug("dead end at window %r after %d chars", window, len(out))
            table = _recover(store, initial_text, window_length)
        out.append(get_random_char(table, draw))
        window = "".join(out[-window_length:])
    return "".join(out)
