"""
configuration for buffering diagnostics.

values are read from the environment the first time the config is created:
    PULLQ_BUFFER_WARNING_THRESHOLD  warn when a buffering operator holds this many items (0 disables)
    PULLQ_LOG_BUFFERING             log every materialization at debug level ("1", "true", "yes", "on")
"""

import os
import logging
from dataclasses import dataclass, field, fields

logger = logging.getLogger(__name__)

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"ignoring {name}={raw!r}: not an integer, using {default}")
        return default


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


@dataclass
class PullqConfig:
    """global settings shared by every buffering operator"""

    buffer_warning_threshold: int = field(
        default_factory=lambda: _env_int('PULLQ_BUFFER_WARNING_THRESHOLD', 1_000_000))
    log_buffering: bool = field(
        default_factory=lambda: _env_flag('PULLQ_LOG_BUFFERING', False))

    _instance = None

    @classmethod
    def get_instance(cls) -> 'PullqConfig':
        """get singleton instance"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def set_defaults(cls, **kwargs) -> None:
        """override configuration values on the shared instance"""
        instance = cls.get_instance()
        for key, value in kwargs.items():
            if not hasattr(instance, key):
                raise AttributeError(f"unknown config option '{key}'")
            setattr(instance, key, value)

    @classmethod
    def reset(cls) -> None:
        """restore every option to its environment-derived default"""
        instance = cls.get_instance()
        fresh = cls()
        for f in fields(cls):
            setattr(instance, f.name, getattr(fresh, f.name))

    def should_warn(self, size: int) -> bool:
        return 0 < self.buffer_warning_threshold <= size


def report_buffer(log: logging.Logger, operator: str, size: int, what: str = 'items') -> None:
    """log the size of something an operator had to materialize"""
    cfg = PullqConfig.get_instance()
    if cfg.should_warn(size):
        log.warning(f"{operator} buffered {size} {what} (threshold {cfg.buffer_warning_threshold})")
    elif cfg.log_buffering:
        log.debug(f"{operator} buffered {size} {what}")


# global configuration instance
config = PullqConfig.get_instance()
