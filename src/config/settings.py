from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_env: str = "local"

    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "pagination_demo"
    db_user: str = "pagination_user"
    db_password: str = "pagination_password"
    # full SQLAlchemy URL, wins over the db_* parts (e.g. "sqlite:///demo.db")
    db_url: str | None = None

    # env: PAGINATION_RUNNER_PAGE_SIZE
    pagination_runner_page_size: int = Field(default=5, gt=0)
    pagination_runner_table: str = "word"
    pagination_runner_key_column: str = "id"
    pagination_runner_handler: str | None = None
    pagination_runner_cache_count: bool = False

    @property
    def database_url(self) -> str:
        if self.db_url:
            return self.db_url
        # psycopg 3 + SQLAlchemy 2.x
        return (
            f"postgresql+psycopg://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
