"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Local development mode (set STAGECRAFT_LOCAL_MODE=1 for colored console logs)
    local_mode: bool = False

    # CORS
    cors_allowed_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "info"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "STAGECRAFT_",
    }

    @property
    def json_logs(self) -> bool:
        """Structured JSON logs everywhere except local mode."""
        return not self.local_mode


settings = Settings()
