from hello_kubernetes.app import create_app
from hello_kubernetes.config import Config, ConfigError

__version__ = "0.1.0"

__all__ = ["create_app", "Config", "ConfigError", "__version__"]
