"""Rate configuration loading."""

import logging
import math
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml
from dotenv import load_dotenv

from .errors import ConfigError

logger = logging.getLogger(__name__)

RATES_ENV_VAR = "RATECOMPARE_RATES"


@dataclass(frozen=True)
class Rates:
    """Electricity charge per kWh for each plan band, plus tier thresholds."""

    off_peak: float = 0.074
    mid_peak: float = 0.102
    on_peak: float = 0.151
    ulo: float = 0.024
    ulo_on_peak: float = 0.24
    tier1: float = 0.087
    tier2: float = 0.103
    tier_threshold_winter: float = 1000.0
    tier_threshold_summer: float = 600.0


DEFAULT_RATES = Rates()


def load_rates_from_yaml(config_path: Path) -> Rates:
    """Load rates from a YAML file.

    The file holds a top-level ``rates`` mapping. Keys that are absent keep
    their default value; unknown keys are rejected.
    """
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Could not read rate config {config_path}: {e}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}")

    values = data.get("rates", {}) if isinstance(data, dict) else None
    if not isinstance(values, dict):
        raise ConfigError(f"{config_path}: 'rates' must be a mapping")

    known = {f.name for f in fields(Rates)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigError(f"{config_path}: unknown rate keys: {', '.join(unknown)}")

    overrides = {}
    for key, value in values.items():
        if isinstance(value, bool):
            raise ConfigError(f"{config_path}: rate '{key}' is not a number: {value!r}")
        try:
            overrides[key] = float(value)
        except (TypeError, ValueError):
            raise ConfigError(f"{config_path}: rate '{key}' is not a number: {value!r}")
        if not math.isfinite(overrides[key]):
            raise ConfigError(f"{config_path}: rate '{key}' must be finite")
        if overrides[key] < 0:
            raise ConfigError(f"{config_path}: rate '{key}' must not be negative")

    logger.info("Loaded %d rate value(s) from %s", len(overrides), config_path)
    return replace(DEFAULT_RATES, **overrides)


def resolve_rates(config_path: Path | None = None) -> Rates:
    """Pick the active rates: explicit path, then $RATECOMPARE_RATES, then defaults."""
    load_dotenv()
    if config_path is None:
        env_path = os.environ.get(RATES_ENV_VAR)
        if env_path:
            config_path = Path(env_path)
    if config_path is None:
        return DEFAULT_RATES
    return load_rates_from_yaml(config_path)
