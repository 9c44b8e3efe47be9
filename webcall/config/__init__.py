"""
Configuration module for the web call relay and client.

Key components:
- constants: Application-wide constants, including provider paths, relay
  defaults, runtime event names and the fixed audio parameters.
- logging_config: Console and rotating-file logging for the application logger.
- settings: Pydantic settings models loaded once from the environment.

Usage examples:
```python
from webcall.config.logging_config import configure_logging
from webcall.config.settings import RelaySettings

logger = configure_logging()
settings = RelaySettings.from_env()  # raises ConfigurationError without RETELL_API_KEY
```
"""
