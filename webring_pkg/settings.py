#!/usr/bin/env python3
"""
Settings loader for the webring generator.
Supports configuration from webring.yml, webring.yaml, or webring.json files
in the project root.
"""

import os
import json
import logging
import yaml
from typing import Dict, Any, Optional


class WebringSettings:
    """Load and manage webring configuration settings."""

    # Default configuration, matching the layout created by ``new_webring``
    DEFAULT_SETTINGS = {
        'output': 'public',
        'users': 'users',
        'static': 'static',
        'images': 'images',
        'template': 'static/base.html',
        'about': 'static/about.html',
        'project_name_file': 'projectname.txt',
        'users_title': 'Users',
        'logs': 'logs',
    }

    # Config file names to look for (in order of preference)
    CONFIG_FILES = ['webring.yml', 'webring.yaml', 'webring.json']

    def __init__(self, config_dir: str = None):
        """
        Initialize settings loader.

        Args:
            config_dir: Directory to look for config files. Defaults to current directory.
        """
        self.config_dir = config_dir or os.getcwd()
        self.settings = self.DEFAULT_SETTINGS.copy()
        self.config_file_path = None
        self.logger = logging.getLogger('Webring.Settings')

    def load_settings(self) -> Dict[str, Any]:
        """
        Load settings from configuration file if it exists.

        Returns:
            Dictionary of configuration settings
        """
        config_file = self._find_config_file()

        if config_file:
            self.config_file_path = config_file
            loaded_settings = self._load_config_file(config_file)
            if not isinstance(loaded_settings, dict):
                raise ValueError(f"Configuration file {config_file} must contain a mapping")
            for key, value in loaded_settings.items():
                if key not in self.DEFAULT_SETTINGS:
                    self.logger.warning(f"Ignoring unknown setting '{key}' in {config_file}")
                    continue
                self.settings[key] = value
            self.logger.info(f"Loaded configuration from: {os.path.relpath(config_file, self.config_dir)}")

        return self.settings.copy()

    def _find_config_file(self) -> Optional[str]:
        """
        Find the first available configuration file.

        Returns:
            Path to config file or None if not found
        """
        for filename in self.CONFIG_FILES:
            config_path = os.path.join(self.config_dir, filename)
            if os.path.exists(config_path):
                return config_path
        return None

    def _load_config_file(self, config_path: str) -> Dict[str, Any]:
        """
        Load configuration from a file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Dictionary of configuration settings
        """
        file_ext = os.path.splitext(config_path)[1].lower()
        if file_ext not in ('.yml', '.yaml', '.json'):
            raise ValueError(f"Unsupported config file format: {file_ext}")

        # I/O errors propagate unchanged; only parse errors are reworded
        with open(config_path, 'r', encoding='utf-8') as f:
            try:
                if file_ext == '.json':
                    return json.load(f) or {}
                return yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in configuration file {config_path}: {e}")
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in configuration file {config_path}: {e}")

    def create_sample_config(self, file_format: str = 'yml') -> str:
        """
        Create a sample configuration file.

        Args:
            file_format: Format for config file ('yml', 'yaml', or 'json')

        Returns:
            Path to created sample config file
        """
        if file_format not in ('yml', 'yaml', 'json'):
            raise ValueError(f"Unsupported config file format: {file_format}")

        filename = f'webring.{file_format}'
        config_path = os.path.join(self.config_dir, filename)

        with open(config_path, 'w', encoding='utf-8') as f:
            if file_format in ['yml', 'yaml']:
                # Custom YAML output with comments
                f.write("# Webring Configuration File\n")
                f.write("# Paths are relative to the project root\n\n")
                f.write("# Output\n")
                f.write("output: public\n")
                f.write("logs: logs\n\n")
                f.write("# Project layout\n")
                f.write("users: users\n")
                f.write("static: static\n")
                f.write("images: images\n")
                f.write("template: static/base.html\n")
                f.write("about: static/about.html\n")
                f.write("project_name_file: projectname.txt\n\n")
                f.write("# Page titles\n")
                f.write("users_title: Users\n")
            else:
                json.dump(self.DEFAULT_SETTINGS, f, indent=2)

        return config_path

    def merge_with_args(self, args_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge configuration settings with command-line arguments.
        Command-line arguments take precedence over config file settings.

        Args:
            args_dict: Dictionary of command-line arguments

        Returns:
            Merged configuration dictionary
        """
        merged = self.settings.copy()

        # Only settings keys are taken; other CLI arguments are ignored here
        for key, value in args_dict.items():
            if value is not None and key in self.DEFAULT_SETTINGS:
                merged[key] = value

        return merged

    @staticmethod
    def generator_kwargs(settings: Dict[str, Any]) -> Dict[str, Any]:
        """Settings accepted by the ``Webring`` generator (everything but ``logs``)."""
        return {key: value for key, value in settings.items() if key != 'logs'}
