from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    data_dir: Path = Path.home() / "PortfolioData"
    api_prefix: str = "/api"
    # The frontend is served from anywhere, including file:// during development.
    cors_origins: list[str] = ["*"]
    static_dir: Path | None = None
    search_min_query_length: int = 2
    search_max_results: int = 50
    host: str = "127.0.0.1"
    port: int = 8000

    @property
    def db_path(self) -> Path:
        return self.data_dir / "db.sqlite"

    model_config = {"env_prefix": "PORTFOLIO_"}


settings = Settings()
