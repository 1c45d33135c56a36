"""Configuration template substitution utilities."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic_core import ValidationError

from src.app.runtime.config.config_data import ConfigData

PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def _resolve(expression: str) -> str:
    if ":-" in expression:
        name, default = expression.split(":-", 1)
        return os.getenv(name, default)

    if ":?" in expression:
        name, message = expression.split(":?", 1)
        detail = f": {message}"
    else:
        name, detail = expression, " not set"

    value = os.getenv(name)
    if value is None:
        raise ValueError(f"Required environment variable {name}{detail}")
    return value


def substitute_env_vars(text: str) -> str:
    """Replace environment placeholders in ``text``.

    ``${VAR}`` and ``${VAR:?message}`` fail with ValueError when VAR is unset,
    ``${VAR:-default}`` falls back to the default.
    """
    return PLACEHOLDER.sub(lambda match: _resolve(match.group(1)), text)


def load_templated_yaml(file_path: Path) -> ConfigData:
    """Read a YAML config file, substitute placeholders and validate its ``config`` section.

    Raises:
        ValueError: a placeholder cannot be resolved, the YAML is empty or
            malformed, or the values do not form a valid configuration.
        FileNotFoundError: the file does not exist.
    """
    logger.debug("Loading configuration from {}", file_path)
    content = substitute_env_vars(Path(file_path).read_text())

    try:
        document = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e
    if not document:
        raise ValueError("Failed to parse YAML")

    try:
        return ConfigData(**document.get("config", {}))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
