import math
from dataclasses import dataclass

from markov_text.analytics.store import ModelStore
from markov_text.analytics.table import FrequencyTable


def entropy(table: FrequencyTable) -> float:
    # bits; expects a normalized table
    h = 0.0
    for cd in table:
        if cd.p > 0:
            h -= cd.p * math.log(cd.p, 2)
    return h


@dataclass
class ModelStats:
    window_length: int
    windows: int
    observations: int
    alphabet: int
    mean_branching: float
    mean_entropy: float


def model_stats(store: ModelStore, window_length: int) -> ModelStats:
    n = len(store)
    observations = 0
    followers = set()
    branching = 0
    h = 0.0
    for _, table in store:
        observations += table.total()
        branching += table.size()
        h += entropy(table)
        followers.update(cd.chr for cd in table)
    return ModelStats(
        window_length=window_length,
        windows=n,
        observations=observations,
        alphabet=len(followers),
        mean_branching=(branching / n) if n else 0.0,
        mean_entropy=(h / n) if n else 0.0,
    )
