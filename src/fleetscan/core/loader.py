"""Fleet configuration loader."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from ..errors import ConfigError, ConfigParseError, ConfigReadError
from ..model.fleet import FleetSpec
from ..model.settings import ConfigErrorPolicy
from ..utils.logger import get_logger

logger = get_logger(__name__)


def load_fleet(path: Path) -> FleetSpec:
    """Read and parse the fleet configuration at ``path``."""
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise ConfigReadError(f"Cannot read fleet configuration {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigParseError(f"Fleet configuration {path} is not valid UTF-8: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        logger.warning(f"Fleet configuration {path} is empty")
        return FleetSpec()

    if not isinstance(data, dict):
        raise ConfigParseError(
            f"Fleet configuration {path} must be a mapping, got {type(data).__name__}"
        )

    try:
        fleet = FleetSpec.model_validate(data)
    except ValidationError as e:
        raise ConfigParseError(f"Fleet configuration {path} does not match the schema: {e}") from e

    logger.info(f"Loaded {fleet.cluster_count} clusters in {len(fleet.zones)} zones from {path}")
    return fleet


def load_fleet_or_empty(path: Path, policy: ConfigErrorPolicy = ConfigErrorPolicy.ABORT) -> FleetSpec:
    """Load the fleet, falling back to an empty one when ``policy`` allows it."""
    try:
        return load_fleet(path)
    except ConfigError as e:
        if policy == ConfigErrorPolicy.ABORT:
            raise
        logger.error(f"{e}; continuing with an empty fleet")
        return FleetSpec()
