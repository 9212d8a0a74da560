import os
from dataclasses import dataclass


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""


@dataclass(frozen=True)
class Config:
    host: str = "0.0.0.0"
    port: int = 8080

    @classmethod
    def from_env(cls, environ=None):
        """Reads HOST and PORT, falling back to the defaults."""
        env = os.environ if environ is None else environ

        raw_port = env.get("PORT", str(cls.port))
        try:
            port = int(raw_port)
        except ValueError:
            raise ConfigError(f"PORT must be an integer, got {raw_port!r}") from None
        if not 0 <= port <= 65535:
            raise ConfigError(f"PORT out of range: {port}")

        return cls(host=env.get("HOST", cls.host), port=port)
