from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CARDCAST_")

    app_name: str = "CardCast"
    debug: bool = False
    log_level: str = "INFO"

    cors_origins: list[str] = ["*"]

    # Largest deck text accepted by the parse endpoint (characters)
    max_deck_text_length: int = 100_000


settings = Settings()
