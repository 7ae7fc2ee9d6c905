from .exceptions import (
    NYPDShootingException,
    InvalidInput,
    MissingData,
    DataProcessingError,
    ConfigError,
)
from .logger_config import setup_logger

__all__ = [
    "NYPDShootingException",
    "InvalidInput",
    "MissingData",
    "DataProcessingError",
    "ConfigError",
    "setup_logger",
]
