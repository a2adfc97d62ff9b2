"""Configuration module for bankengine."""

from bankengine.config.schema import Config
from bankengine.config.validator import ConfigValidator

__all__ = ["Config", "ConfigValidator"]
