#!/usr/bin/env python3
"""
Grammar Checker Configuration & Logging Module
==============================================
Application settings, structured logging and the exception hierarchy
shared by the engine, the HTTP layer and the CLI.

Settings come from GRAMMAR_* environment variables. Log lines are JSON
documents by default (GRAMMAR_LOG_FORMAT=text for plain lines) and carry
the correlation id of the request that produced them.

Version: reads from version.json
"""

import os
import sys
import json
import logging
import uuid
import functools
import threading
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Optional, Dict, Any, Callable, List
from pathlib import Path
from dataclasses import dataclass, field

# =============================================================================
# CONSTANTS
# =============================================================================
DEFAULT_MAX_CONTENT_KB = 512        # Request body limit for the HTTP API
MAX_SAFE_CONTENT_KB = 8 * 1024
ROTATE_BYTES = 2 * 1024 * 1024      # Per log file before rotation
ROTATE_KEEP = 3                     # Rotated files kept

DEFAULT_MAX_CONTENT_LENGTH = DEFAULT_MAX_CONTENT_KB * 1024
MAX_SAFE_CONTENT_LENGTH = MAX_SAFE_CONTENT_KB * 1024

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
LOG_FORMATS = ('json', 'text')

ROOT_DIR = Path(__file__).parent


def _read_version(default: str = '1.2.0') -> str:
    try:
        with open(ROOT_DIR / 'version.json', 'r', encoding='utf-8') as f:
            return json.load(f).get('version', default)
    except (OSError, json.JSONDecodeError):
        return default


__version__ = _read_version()
VERSION = __version__
APP_NAME = "GrammarChecker"


# =============================================================================
# APPLICATION SETTINGS
# =============================================================================

def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _is_production() -> bool:
    return os.environ.get('GRAMMAR_ENV', 'development').lower() == 'production'


@dataclass
class AppConfig:
    """Server, request-limit and logging settings."""

    host: str = "127.0.0.1"
    port: int = 5060
    debug: bool = False

    max_content_length: int = DEFAULT_MAX_CONTENT_LENGTH

    log_dir: Path = field(default_factory=lambda: ROOT_DIR / 'logs')
    log_level: str = "INFO"
    log_format: str = "json"
    log_to_file: bool = False
    log_to_console: bool = True

    def __post_init__(self):
        self.log_level = str(self.log_level).upper()
        if self.log_level not in VALID_LOG_LEVELS:
            self.log_level = "INFO"

        # Production never runs with the debugger on
        if _is_production():
            self.debug = False
            self.log_level = "WARNING"

        if self.log_to_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """Read GRAMMAR_* environment variables over the defaults."""
        env = os.environ.get
        return cls(
            host=env('GRAMMAR_HOST', cls.host),
            port=int(env('GRAMMAR_PORT', cls.port)),
            debug=_env_flag('GRAMMAR_DEBUG'),
            max_content_length=int(env('GRAMMAR_MAX_CONTENT_LENGTH', DEFAULT_MAX_CONTENT_LENGTH)),
            log_level=env('GRAMMAR_LOG_LEVEL', cls.log_level),
            log_format=env('GRAMMAR_LOG_FORMAT', cls.log_format).lower(),
            log_to_file=_env_flag('GRAMMAR_LOG_TO_FILE'),
        )

    def validate(self) -> tuple:
        """Return (ok, problems) for settings that cannot be normalized away."""
        problems: List[str] = []

        if not 0 < self.port < 65536:
            problems.append(f"Port out of range: {self.port}")
        if self.max_content_length <= 0:
            problems.append("max_content_length must be positive")
        elif self.max_content_length > MAX_SAFE_CONTENT_LENGTH:
            problems.append(f"max_content_length above {MAX_SAFE_CONTENT_KB}KB")
        if self.log_format not in LOG_FORMATS:
            problems.append(f"Unknown log_format '{self.log_format}' (use json or text)")

        return (not problems, problems)


_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Process-wide settings, read from the environment on first use."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reset_config():
    """Forget cached settings so the next get_config() re-reads them."""
    global _config
    _config = None


# =============================================================================
# CORRELATION IDS
# =============================================================================

_request_context = threading.local()


def set_correlation_id(correlation_id: str):
    _request_context.correlation_id = correlation_id


def get_correlation_id() -> str:
    return getattr(_request_context, 'correlation_id', None) or '-'


def new_correlation_id() -> str:
    """Start a new id for the current thread (one per API request)."""
    correlation_id = uuid.uuid4().hex[:12]
    set_correlation_id(correlation_id)
    return correlation_id


# =============================================================================
# STRUCTURED LOGGING
# =============================================================================

def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class JsonFormatter(logging.Formatter):
    """One JSON object per line; structured fields ride in record.fields."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'timestamp': _utc_timestamp(),
            'level': record.levelname,
            'logger': record.name,
            'correlation_id': getattr(record, 'correlation_id', get_correlation_id()),
            'message': record.getMessage(),
        }
        entry.update(getattr(record, 'fields', {}))
        if record.exc_info:
            entry['traceback'] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Plain lines with the structured fields appended as key=value."""

    def __init__(self):
        super().__init__('%(asctime)s [%(levelname)s] %(name)s (%(correlation_id)s) - %(message)s')

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, 'correlation_id'):
            record.correlation_id = get_correlation_id()
        line = super().format(record)
        fields = getattr(record, 'fields', {})
        if fields:
            line += ' ' + ' '.join(f'{k}={v}' for k, v in fields.items())
        return line


def _build_handlers(name: str, config: AppConfig) -> List[logging.Handler]:
    formatter = JsonFormatter() if config.log_format == 'json' else TextFormatter()
    handlers: List[logging.Handler] = []

    if config.log_to_console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if config.log_to_file:
        handlers.append(RotatingFileHandler(
            config.log_dir / f"{name.replace('.', '_')}.log",
            maxBytes=ROTATE_BYTES,
            backupCount=ROTATE_KEEP,
            encoding='utf-8'
        ))

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


class StructuredLogger:
    """
    Thin wrapper over a stdlib logger that accepts keyword fields.

        logger.info("Lexicon updated", tables=['nouns'])
    """

    def __init__(self, name: str, config: Optional[AppConfig] = None):
        self.name = name
        self.config = config or get_config()
        self.logger = logging.getLogger(name)
        self.logger.setLevel(self.config.log_level)
        self.logger.propagate = False
        self.logger.handlers.clear()
        for handler in _build_handlers(name, self.config):
            self.logger.addHandler(handler)

    def _log(self, level: int, message: str, exc_info: bool = False, **fields):
        if not self.logger.isEnabledFor(level):
            return
        self.logger.log(level, message, exc_info=exc_info,
                        extra={'fields': fields, 'correlation_id': get_correlation_id()})

    def debug(self, message: str, **fields):
        self._log(logging.DEBUG, message, **fields)

    def info(self, message: str, **fields):
        self._log(logging.INFO, message, **fields)

    def warning(self, message: str, **fields):
        self._log(logging.WARNING, message, **fields)

    def error(self, message: str, exc_info: bool = False, **fields):
        self._log(logging.ERROR, message, exc_info=exc_info, **fields)

    def exception(self, message: str, **fields):
        """Error with the active traceback attached."""
        self._log(logging.ERROR, message, exc_info=True, **fields)


_loggers: Dict[str, StructuredLogger] = {}
_loggers_lock = threading.Lock()


def get_logger(name: str) -> StructuredLogger:
    """Shared StructuredLogger per name, rebuilt when settings are reset."""
    config = get_config()
    with _loggers_lock:
        logger = _loggers.get(name)
        if logger is None or logger.config is not config:
            logger = StructuredLogger(name, config)
            _loggers[name] = logger
        return logger


# =============================================================================
# ERRORS
# =============================================================================

class GrammarCheckError(Exception):
    """Root of the grammar checker's exceptions; carries an API error code."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR",
                 status_code: int = 500, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': False,
            'error': {'code': self.code, 'message': self.message, 'details': self.details},
        }


class ValidationError(GrammarCheckError):
    """Bad request input."""

    def __init__(self, message: str, field: Optional[str] = None, **details):
        super().__init__(message, "VALIDATION_ERROR", 400, {'field': field, **details})


class ConfigurationError(GrammarCheckError):
    """Bad configuration value, lexicon table name or override file."""

    def __init__(self, message: str, source: Optional[str] = None, **details):
        super().__init__(message, "CONFIGURATION_ERROR", 400, {'source': source, **details})


class ProcessingError(GrammarCheckError):
    """Unexpected internal failure."""

    def __init__(self, message: str, stage: Optional[str] = None, **details):
        super().__init__(message, "PROCESSING_ERROR", 500, {'stage': stage, **details})


def handle_errors(logger: Optional[StructuredLogger] = None):
    """
    Translate stdlib exceptions into the GrammarCheckError hierarchy.

    FileNotFoundError and JSON errors become ConfigurationError,
    ValueError becomes ValidationError, anything else ProcessingError.
    GrammarCheckError subclasses pass through untouched.
    """
    def decorator(func: Callable):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            log = logger or get_logger(func.__module__)
            try:
                return func(*args, **kwargs)
            except GrammarCheckError:
                raise
            except FileNotFoundError as e:
                log.error(f"Missing file in {func.__name__}: {e}")
                raise ConfigurationError(f"File not found: {e.filename or e}") from e
            except json.JSONDecodeError as e:
                log.error(f"Bad JSON in {func.__name__}: {e}")
                raise ConfigurationError(f"Invalid JSON: {e}") from e
            except ValueError as e:
                log.warning(f"Rejected value in {func.__name__}: {e}")
                raise ValidationError(str(e)) from e
            except Exception as e:
                log.exception(f"{func.__name__} failed: {e}")
                raise ProcessingError(f"{func.__name__} failed: {type(e).__name__}",
                                      stage=func.__name__) from e
        return wrapper
    return decorator
