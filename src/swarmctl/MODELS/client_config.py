"""
Connection settings for the orchestration API.
"""
import os
from typing import Optional
from dotenv import dotenv_values
from pydantic import BaseModel, Field, ValidationError
from ..errors import ConfigError

DEFAULT_HOST = "http://127.0.0.1:4242"


class ClientConfig(BaseModel):
    """
    Where the orchestration API lives and how long to wait for it.
    """
    host: str = DEFAULT_HOST
    timeout: float = Field(default=30.0, gt=0)

    @classmethod
    def from_env(cls, env_file: Optional[str] = ".env", **overrides) -> "ClientConfig":
        """
        Builds a configuration from SWARMCTL_HOST and SWARMCTL_TIMEOUT.

        Values set in the process environment take precedence over those
        found in the .env file; non-None overrides win over both.

        :param env_file: Path to a .env file, or None to skip it.
        :param overrides: Explicit settings, e.g. from command line options.
        :return: The resolved configuration.
        """
        values = {}
        if env_file and os.path.exists(env_file):
            values.update(dotenv_values(env_file))
        values.update(os.environ)

        settings = {}
        if values.get("SWARMCTL_HOST"):
            settings["host"] = values["SWARMCTL_HOST"]
        if values.get("SWARMCTL_TIMEOUT"):
            settings["timeout"] = values["SWARMCTL_TIMEOUT"]
        settings.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return cls(**settings)
        except ValidationError as e:
            raise ConfigError(f"invalid client settings: {e}") from e
