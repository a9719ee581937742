from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    gitime reads no configuration file. Every value can be overridden per
    invocation from the command line.
    """

    # Repository root to stamp; empty means the current working directory
    GITIME_REPO_PATH: str = ""

    # Development and debugging
    GITIME_DEBUG: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
