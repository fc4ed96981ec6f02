import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # Application
    app_name: str = os.getenv("APP_NAME", "Library Catalog")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "False")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "WARNING")

    # Catalog starts with the three sample books unless disabled
    seed_catalog: bool = _env_flag("SEED_CATALOG", "True")

    # CLI output: plain | json | rich
    default_output: str = os.getenv("CATALOG_CLI_OUTPUT", "plain")

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()


settings = Settings()
