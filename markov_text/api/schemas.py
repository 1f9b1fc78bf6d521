from pydantic import BaseModel, Field


class GenerateIn(BaseModel):
    initial_text: str
    text_length: int = Field(ge=0)
    seed: int | None = None


class GenerateOut(BaseModel):
    text: str
    length: int


class StatsOut(BaseModel):
    window_length: int
    windows: int
    observations: int
    alphabet: int
    mean_branching: float
    mean_entropy: float
