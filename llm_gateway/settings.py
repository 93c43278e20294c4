# llm_gateway/settings.py
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="LLM Gateway")
    ENV: str = Field(default="dev", validation_alias=AliasChoices("ENV", "APP_ENV", "NODE_ENV"))
    DEBUG: bool = Field(default=False)

    # server
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=3000)

    # shared secret checked against the x-api-key header
    API_KEY: str | None = None

    # provider
    OPENAI_API_KEY: str | None = None
    OPENAI_TIMEOUT: float = Field(default=60.0, gt=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME

    @property
    def is_dev(self) -> bool:
        return self.ENV.lower() in ("dev", "development")

    @property
    def expose_errors(self) -> bool:
        """Echo internal exception detail to clients only in development."""
        return self.is_dev


settings = Settings()
