#!/usr/bin/env python3
"""
Configuration System for the Quadtree

Centralized configuration for tree construction, traversal checks, logging
and performance tracking. Provides type-safe configuration with validation
and defaults.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Any, List

import yaml

logger = logging.getLogger(__name__)

CAPACITY_MODES = ["dynamic", "const"]
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class CapacityConfig:
    """Configuration for per-node capacity."""
    default_capacity: int = 16
    mode: str = "dynamic"  # "dynamic" or "const"


@dataclass
class ValidationConfig:
    """Configuration for runtime checks."""
    detect_concurrent_modification: bool = True
    debug_assertions: bool = True


@dataclass
class LoggingConfig:
    """Configuration for logging and debugging."""
    log_level: str = "WARNING"
    log_splits: bool = False


@dataclass
class PerformanceConfig:
    """Configuration for performance tracking."""
    max_history_size: int = 1000


@dataclass
class QuadTreeConfig:
    """
    Master configuration class for quadtrees.

    One instance is shared by every node of a tree.
    """
    capacity: CapacityConfig = field(default_factory=CapacityConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    performance: PerformanceConfig = field(default_factory=PerformanceConfig)

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_config()

    def _validate_config(self):
        """Validate configuration parameters."""
        if isinstance(self.capacity.default_capacity, bool) or not isinstance(self.capacity.default_capacity, int):
            raise ValueError("default_capacity must be an integer")
        if self.capacity.default_capacity <= 0:
            raise ValueError("default_capacity must be positive")
        if self.capacity.mode.lower() not in CAPACITY_MODES:
            raise ValueError(f"capacity mode must be one of {CAPACITY_MODES}")

        if self.performance.max_history_size <= 0:
            raise ValueError("max_history_size must be positive")

        if self.logging.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {VALID_LOG_LEVELS}")

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'QuadTreeConfig':
        """
        Create configuration from dictionary.

        Missing sections and keys fall back to their defaults.
        """
        config_dict = config_dict or {}
        return cls(
            capacity=CapacityConfig(**config_dict.get('capacity', {})),
            validation=ValidationConfig(**config_dict.get('validation', {})),
            logging=LoggingConfig(**config_dict.get('logging', {})),
            performance=PerformanceConfig(**config_dict.get('performance', {}))
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'capacity': {
                'default_capacity': self.capacity.default_capacity,
                'mode': self.capacity.mode
            },
            'validation': {
                'detect_concurrent_modification': self.validation.detect_concurrent_modification,
                'debug_assertions': self.validation.debug_assertions
            },
            'logging': {
                'log_level': self.logging.log_level,
                'log_splits': self.logging.log_splits
            },
            'performance': {
                'max_history_size': self.performance.max_history_size
            }
        }

    def validate_compatibility(self) -> List[str]:
        """
        Validate configuration compatibility and return warnings.

        Returns list of warning messages for potential issues.
        """
        warnings = []

        if not self.validation.detect_concurrent_modification:
            warnings.append("Concurrent modification detection disabled - inserting during a query gives undefined results")

        if self.logging.log_splits and self.logging.log_level.upper() != "DEBUG":
            warnings.append("log_splits enabled but log_level is not DEBUG - split messages will be filtered")

        if self.capacity.default_capacity == 1:
            warnings.append("Capacity of 1 produces very deep trees")
        elif self.capacity.default_capacity > 1024:
            warnings.append("Very high capacity degrades queries towards a linear scan")

        return warnings

    def apply_logging(self):
        """Set the package logger level from this configuration."""
        logging.getLogger('pointquad').setLevel(self.logging.log_level.upper())

    def log_configuration_summary(self):
        """Log a summary of the current configuration."""
        logger.info("=== QUADTREE CONFIGURATION SUMMARY ===")
        logger.info(f"Capacity: {self.capacity.default_capacity} ({self.capacity.mode})")
        logger.info(f"Validation: concurrent_modification={self.validation.detect_concurrent_modification}, "
                    f"debug_assertions={self.validation.debug_assertions}")
        logger.info(f"Performance: max_history_size={self.performance.max_history_size}")

        warnings = self.validate_compatibility()
        if warnings:
            logger.warning("Configuration warnings:")
            for warning in warnings:
                logger.warning(f"  - {warning}")


# Global default configuration instance
DEFAULT_CONFIG = QuadTreeConfig()


def get_default_config() -> QuadTreeConfig:
    """Get default configuration instance."""
    return DEFAULT_CONFIG


def create_config_from_file(config_path: str) -> QuadTreeConfig:
    """
    Create configuration from YAML or JSON file.

    Args:
        config_path: Path to configuration file

    Returns:
        QuadTreeConfig instance
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    if config_path.endswith('.yaml') or config_path.endswith('.yml'):
        with open(config_path, 'r') as f:
            config_dict = yaml.safe_load(f)
    elif config_path.endswith('.json'):
        with open(config_path, 'r') as f:
            config_dict = json.load(f)
    else:
        raise ValueError("Configuration file must be .yaml, .yml, or .json")

    return QuadTreeConfig.from_dict(config_dict)


def save_config_to_file(config: QuadTreeConfig, config_path: str):
    """
    Save configuration to YAML or JSON file.

    Args:
        config: Configuration to save
        config_path: Path to save configuration
    """
    config_dict = config.to_dict()

    if config_path.endswith('.yaml') or config_path.endswith('.yml'):
        with open(config_path, 'w') as f:
            yaml.dump(config_dict, f, default_flow_style=False)
    elif config_path.endswith('.json'):
        with open(config_path, 'w') as f:
            json.dump(config_dict, f, indent=2)
    else:
        raise ValueError("Configuration file must be .yaml, .yml, or .json")
