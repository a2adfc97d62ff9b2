"""Centralized configuration validation for bankengine."""

from __future__ import annotations

import math
from typing import Any

from bankengine.errors import ConfigurationError


class ConfigValidator:
    """
    Centralized validation for bank configuration.

    All validation happens once, when a Bank is constructed, to ensure:
    - No unknown parameters
    - Type correctness
    - Valid parameter ranges
    - Clear error messages with actionable feedback
    """

    VALID_LOG_LEVELS = {"DEEP_DEBUG", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

    INT_PARAMS = ("initial_treasury", "bucket_capacity")
    FLOAT_PARAMS = ("loan_interest_rate", "deposit_interest_rate")
    KNOWN_KEYS = frozenset(INT_PARAMS + FLOAT_PARAMS + ("logging",))

    @staticmethod
    def validate_config(cfg: dict[str, Any]) -> None:
        """
        Validate all configuration parameters.

        Parameters
        ----------
        cfg : dict
            Configuration dictionary to validate.

        Raises
        ------
        ConfigurationError
            If any validation check fails.
        """
        ConfigValidator._validate_keys(cfg)
        ConfigValidator._validate_types(cfg)
        ConfigValidator._validate_ranges(cfg)

        if "logging" in cfg:
            ConfigValidator._validate_logging(cfg["logging"])

    @staticmethod
    def _validate_keys(cfg: dict[str, Any]) -> None:
        unknown = set(cfg) - ConfigValidator.KNOWN_KEYS
        if unknown:
            raise ConfigurationError(
                f"Unknown config parameter(s): {sorted(unknown)}. "
                f"Valid parameters: {sorted(ConfigValidator.KNOWN_KEYS)}"
            )

    @staticmethod
    def _validate_types(cfg: dict[str, Any]) -> None:
        # bool is an int subclass but never a meaningful amount or rate
        for key in ConfigValidator.INT_PARAMS:
            if key not in cfg:
                continue
            val = cfg[key]
            if isinstance(val, bool) or not isinstance(val, int):
                raise ConfigurationError(
                    f"Config parameter '{key}' must be int, got {type(val).__name__}"
                )

        for key in ConfigValidator.FLOAT_PARAMS:
            if key not in cfg:
                continue
            val = cfg[key]
            if isinstance(val, bool) or not isinstance(val, (int, float)):
                raise ConfigurationError(
                    f"Config parameter '{key}' must be float, got {type(val).__name__}"
                )

    @staticmethod
    def _validate_ranges(cfg: dict[str, Any]) -> None:
        # (min_val, max_val); None means unbounded
        constraints = {
            "initial_treasury": (0, None),
            "bucket_capacity": (1, None),
            "loan_interest_rate": (0.0, None),
            "deposit_interest_rate": (0.0, None),
        }

        for key, (min_val, max_val) in constraints.items():
            if key not in cfg:
                continue
            val = cfg[key]

            # NaN fails every comparison and inf overflows int() downstream
            if isinstance(val, float) and not math.isfinite(val):
                raise ConfigurationError(
                    f"Config parameter '{key}' must be finite, got {val}"
                )

            if min_val is not None and val < min_val:
                raise ConfigurationError(
                    f"Config parameter '{key}' must be >= {min_val}, got {val}"
                )
            if max_val is not None and val > max_val:
                raise ConfigurationError(
                    f"Config parameter '{key}' must be <= {max_val}, got {val}"
                )

    @staticmethod
    def _validate_logging(log_config: Any) -> None:
        """
        Validate the logging section.

        Parameters
        ----------
        log_config : dict
            Logging configuration dictionary with keys:
            - default_level: str (e.g., 'INFO', 'DEBUG')
            - modules: dict[str, str] (per-module overrides)

        Raises
        ------
        ConfigurationError
            If logging configuration is invalid.
        """
        if not isinstance(log_config, dict):
            raise ConfigurationError(
                f"Logging config must be dict, got {type(log_config).__name__}"
            )

        if "default_level" in log_config:
            ConfigValidator._validate_level(log_config["default_level"], "default_level")

        if "modules" in log_config:
            modules = log_config["modules"]
            if not isinstance(modules, dict):
                raise ConfigurationError(
                    f"Logging modules must be dict, got {type(modules).__name__}"
                )
            for module_name, level in modules.items():
                if not isinstance(module_name, str):
                    raise ConfigurationError(
                        f"Module name must be str, got {type(module_name).__name__}"
                    )
                ConfigValidator._validate_level(level, f"module '{module_name}'")

    @staticmethod
    def _validate_level(level: Any, where: str) -> None:
        if not isinstance(level, str):
            raise ConfigurationError(
                f"Log level for {where} must be str, got {type(level).__name__}"
            )
        if level.upper() not in ConfigValidator.VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level '{level}' for {where}. "
                f"Must be one of {ConfigValidator.VALID_LOG_LEVELS}"
            )
