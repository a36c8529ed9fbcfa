from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Defaults for ranking calls that do not pass their own options.

    The module-level instance is built at import time from the environment
    and a ``.env`` file in the current working directory, so an invalid
    ``FRAGMENT_MAX_RESULTS`` there makes importing ``fragment.matching`` raise
    ``pydantic.ValidationError``.
    """

    max_results: int = Field(default=10, ge=0)
    case_sensitive: bool = False

    model_config = {
        "env_prefix": "FRAGMENT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
