import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    EMPLOYEES_DATA_FILE: str = "data/employees.json"
    # <= 0 re-reads the data file on every request
    EMPLOYEES_CACHE_TTL_SECONDS: float = 0.0

    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100
    DEFAULT_SORT_BY: str = "id"

    EXPORT_FILENAME_PREFIX: str = "employees"

    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
