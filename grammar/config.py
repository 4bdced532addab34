"""
Grammar Engine Configuration Module
===================================
Settings for the rule engine, layered in this order:

1. Dataclass defaults (every rule on, 50-character context window)
2. grammar_config.json at the project root, when present
3. GRAMMAR_* environment variables
4. Runtime calls: config.set('engine.disabled_rules', ['A_AN'])

The default engine picks up context_window and disabled_rules changes
on its next check.
"""

import os
import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple
from dataclasses import dataclass, field, fields, asdict, is_dataclass

from config_logging import get_logger, handle_errors

__version__ = "1.0.0"

logger = get_logger('grammar.config')

CONFIG_FILE = Path(__file__).parent.parent / "grammar_config.json"


@dataclass
class EngineConfig:
    """Scan & merge engine settings."""
    context_window: int = 50       # Characters of context on each side of a match
    disabled_rules: list = field(default_factory=list)
    max_text_length: int = 0       # Enforced by the HTTP layer; 0 = unlimited


@dataclass
class LexiconConfig:
    """Lexical table settings."""
    override_file: Optional[str] = None  # JSON overrides merged over the stock tables


@dataclass
class GrammarConfig:
    engine: EngineConfig = field(default_factory=EngineConfig)
    lexicon: LexiconConfig = field(default_factory=LexiconConfig)


def _parse_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"expected an integer, got {value!r}")
    return int(value)


def _parse_positive_int(value: Any) -> int:
    number = _parse_int(value)
    if number <= 0:
        raise ValueError(f"expected a positive integer, got {number}")
    return number


def _parse_non_negative_int(value: Any) -> int:
    number = _parse_int(value)
    if number < 0:
        raise ValueError(f"expected zero or more, got {number}")
    return number


def _parse_list(value: Any) -> list:
    """Comma-separated string or list of strings, blanks dropped."""
    if isinstance(value, str):
        value = value.split(',')
    elif not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"expected a list of strings, got {value!r}")
    return [item.strip() for item in value if item.strip()]


def _parse_optional_path(value: Any) -> Optional[str]:
    if value is None or value == '':
        return None
    if not isinstance(value, str):
        raise ValueError(f"expected a file path, got {value!r}")
    return value


# (section, attribute) -> parser, applied to file, environment and set() values
FIELD_PARSERS: Dict[Tuple[str, str], Callable[[Any], Any]] = {
    ('engine', 'context_window'): _parse_positive_int,
    ('engine', 'disabled_rules'): _parse_list,
    ('engine', 'max_text_length'): _parse_non_negative_int,
    ('lexicon', 'override_file'): _parse_optional_path,
}

ENV_OVERRIDES: Dict[str, Tuple[str, str]] = {
    'GRAMMAR_CONTEXT_WINDOW': ('engine', 'context_window'),
    'GRAMMAR_DISABLED_RULES': ('engine', 'disabled_rules'),
    'GRAMMAR_MAX_TEXT_LENGTH': ('engine', 'max_text_length'),
    'GRAMMAR_LEXICON_FILE': ('lexicon', 'override_file'),
}


_config: Optional[GrammarConfig] = None


def get_config() -> GrammarConfig:
    """The process-wide engine configuration, loaded on first use."""
    global _config
    if _config is None:
        _config = _load_config()
    return _config


def _load_config(path: Optional[Path] = None) -> GrammarConfig:
    config = GrammarConfig()
    source = path or CONFIG_FILE

    if source.exists():
        try:
            with open(source, 'r', encoding='utf-8') as f:
                _merge_sections(config, json.load(f))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable config file: {e}", path=str(source))

    _merge_environment(config)
    return config


def _merge_sections(config: GrammarConfig, data: Dict[str, Any]):
    """Copy known section.attribute values from a parsed JSON document."""
    for section_field in fields(config):
        values = data.get(section_field.name)
        if not isinstance(values, dict):
            continue
        section = getattr(config, section_field.name)
        for name, value in values.items():
            parse = FIELD_PARSERS.get((section_field.name, name))
            if parse is None:
                continue
            try:
                setattr(section, name, parse(value))
            except ValueError as e:
                logger.warning(f"Ignoring {section_field.name}.{name}={value!r}: {e}")


def _merge_environment(config: GrammarConfig):
    for env_var, (section_name, attr_name) in ENV_OVERRIDES.items():
        raw = os.environ.get(env_var)
        if raw is None:
            continue
        try:
            parse = FIELD_PARSERS[(section_name, attr_name)]
            setattr(getattr(config, section_name), attr_name, parse(raw))
        except ValueError as e:
            logger.warning(f"Ignoring {env_var}={raw!r}: {e}")


def _split_key(key: str) -> Tuple[str, str]:
    parts = key.split('.')
    if len(parts) != 2 or not all(parts):
        raise ValueError(f"Config keys look like 'section.name', got {key!r}")
    return parts[0], parts[1]


def get(key: str, default: Any = None) -> Any:
    """
    Read a value by dot-notation key, e.g. get('engine.context_window').

    Unknown keys return default.
    """
    value: Any = get_config()
    for part in key.split('.'):
        if not is_dataclass(value) or not hasattr(value, part):
            return default
        value = getattr(value, part)
    return value


def set(key: str, value: Any):
    """
    Change a value by dot-notation key, e.g. set('engine.context_window', 80).

    Raises:
        ValueError: key is not an existing 'section.name' pair, or the
            value does not fit the setting
    """
    section_name, attr_name = _split_key(key)
    config = get_config()

    section = getattr(config, section_name, None)
    if not is_dataclass(section):
        raise ValueError(f"Unknown config section: {section_name}")
    if attr_name not in {f.name for f in fields(section)}:
        raise ValueError(f"Unknown config key: {section_name}.{attr_name}")
    parse = FIELD_PARSERS[(section_name, attr_name)]
    setattr(section, attr_name, parse(value))


def is_rule_enabled(rule_id: str) -> bool:
    return rule_id not in get_config().engine.disabled_rules


@handle_errors(logger)
def save_config(path: Optional[Path] = None):
    """Write the current configuration as JSON."""
    target = path or CONFIG_FILE
    with open(target, 'w', encoding='utf-8') as f:
        json.dump(asdict(get_config()), f, indent=2)
    logger.info("Grammar configuration saved", path=str(target))


def reset_config():
    """Back to dataclass defaults (file and environment are not re-read)."""
    global _config
    _config = GrammarConfig()
