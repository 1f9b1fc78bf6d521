from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MARKOV_", env_file=".env", extra="ignore")

    window_length: int = 3
    seed: int = 20
    strip_cr: bool = True
    encoding: str = "utf-8"
    corpus_path: str | None = None
    log_level: str = "WARNING"
    api_key: str | None = None
    host: str = "127.0.0.1"
    port: int = 8000

settings = Settings()
