from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings read from ``BOOKGRAPH_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="BOOKGRAPH_")

    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False
    log_level: str = "INFO"

    # Load the sample authors and books into the store at startup
    seed: bool = True

    allow_get: bool = True
