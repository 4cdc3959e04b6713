from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    data_dir: Path = Path.home() / ".jobboard"
    api_prefix: str = "/api/v1"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    cors_allow_origins: list[str] = ["*"]
    # One accepted posting per submitter per rolling hour.
    rate_limit_window_seconds: int = 3600
    rate_limit_max_submissions: int = 1
    captcha_min: int = 1
    captcha_max: int = 10
    # Disable when the service is not behind a proxy that sets X-Forwarded-For.
    trust_forwarded_headers: bool = True

    @property
    def db_path(self) -> Path:
        return self.data_dir / "jobboard.sqlite"

    model_config = {"env_prefix": "JOBBOARD_"}


settings = Settings()
