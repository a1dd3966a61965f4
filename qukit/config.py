# qukit/config.py

"""
Runtime configuration for qukit, read from environment variables.

QUKIT_ENGINE     module path of the native amplitude engine (default: qukit_native)
QUKIT_LOG_LEVEL  level name for qukit loggers (default: WARNING)
"""

import os
from dataclasses import dataclass

DEFAULT_ENGINE_MODULE = "qukit_native"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class QukitConfig:
    engine_module: str = DEFAULT_ENGINE_MODULE
    log_level: str = DEFAULT_LOG_LEVEL


def get_config() -> QukitConfig:
    """Builds the configuration from the current environment."""
    return QukitConfig(
        engine_module=os.environ.get("QUKIT_ENGINE") or DEFAULT_ENGINE_MODULE,
        log_level=(os.environ.get("QUKIT_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )
