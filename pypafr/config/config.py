#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Configuration module for pypafr.

Contains functionality for:
1. Central configuration settings management with singleton pattern
2. JSON configuration file loading
3. Settings export for display and debugging

This module provides centralized configuration management for pypafr,
supporting simple parameter overrides from JSON files.
"""

import os
import json
import logging
from typing import Dict, Any

from .exceptions import ConfigError

logger = logging.getLogger(__name__)


class Config:
    """
    Central configuration settings for pypafr with singleton pattern.

    Settings are stored as class attributes so that every module reads
    the same values without passing a configuration object around.

    Attributes:
        SHOW_PROGRESS: Show a progress bar while parsing large inputs
        TAG_SUMMARY_LIMIT: Maximum number of tag names listed by summaries

    Example:
        >>> config = Config.get_instance()
        >>> config.TAG_SUMMARY_LIMIT = 5
        >>> Config.load_from_file("my_config.json")
    """

    # Singleton instance
    _instance = None

    #############################################################################
    #                           Runtime Options
    #############################################################################
    SHOW_PROGRESS = True
    PROGRESS_MIN_LINES = 100000         # Inputs shorter than this never show a progress bar
    FILE_ENCODING = "utf-8"

    #############################################################################
    #                           Table Display
    #############################################################################
    TAG_SUMMARY_LIMIT = 12              # Tag names listed by PafTable.summarize()

    #############################################################################
    #                           Alignment Filtering
    #############################################################################
    # minimap2 'tp' tag: P primary, S secondary, I/i inversion
    SECONDARY_KEEP_CODES = ["I", "i", "P"]
    PRIMARY_CODES = ["P"]

    _DEFAULTS = None

    def __init__(self):
        """Initialize configuration settings."""
        # Implementation left empty as we're using class variables
        pass

    @classmethod
    def get_instance(cls) -> 'Config':
        """
        Get the singleton instance of Config.

        Returns:
            Singleton Config instance
        """
        if cls._instance is None:
            cls._DEFAULTS = {key: list(value) if isinstance(value, list) else value
                             for key, value in cls.get_all_settings().items()}
            cls._instance = cls()
        return cls._instance

    @classmethod
    def get_all_settings(cls) -> Dict[str, Any]:
        """
        Get all public settings as a dictionary.

        Returns:
            Dictionary mapping setting names to their current values
        """
        settings = {}
        for key in dir(cls):
            if key.isupper() and not key.startswith('_'):
                value = getattr(cls, key)
                if not callable(value):
                    settings[key] = value
        return settings

    @classmethod
    def reset(cls) -> None:
        """Restore every setting to the value it had when the singleton was created."""
        if cls._DEFAULTS is None:
            return
        for key, value in cls._DEFAULTS.items():
            setattr(cls, key, list(value) if isinstance(value, list) else value)
        logger.debug("Configuration reset to defaults")

    @classmethod
    def load_from_file(cls, filepath: str) -> bool:
        """
        Load settings from a JSON configuration file.

        Keys must match existing setting names; unknown keys are skipped
        with a warning.

        Args:
            filepath: Path to the JSON configuration file

        Returns:
            True if the file was loaded

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigError: If the file is not valid JSON or not a JSON object
        """
        logger.debug(f"Loading configuration from: {filepath}")

        if not os.path.exists(filepath):
            error_msg = f"Configuration file not found: {filepath}"
            logger.error(error_msg)
            raise FileNotFoundError(error_msg)

        # Make sure defaults are captured before anything is overridden
        cls.get_instance()

        try:
            with open(filepath, 'r') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            error_msg = f"Invalid JSON in configuration file {filepath}: {str(e)}"
            logger.error(error_msg)
            raise ConfigError(error_msg) from e

        if not isinstance(data, dict):
            error_msg = f"Configuration file {filepath} must contain a JSON object"
            logger.error(error_msg)
            raise ConfigError(error_msg)

        known = cls.get_all_settings()
        updated = 0
        for key, value in data.items():
            if key not in known:
                logger.warning(f"Unknown configuration setting ignored: {key}")
                continue
            setattr(cls, key, value)
            updated += 1
            logger.debug(f"Set {key} = {value}")

        logger.info(f"Loaded {updated} settings from {filepath}")
        return True
