#!/usr/bin/env python3
"""
Unified Configuration Loader
Loads todo view configuration from config.yaml and .env files
"""

import os
import yaml
from pathlib import Path
from typing import Any, Optional
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from todo_panes import TodoItemViewPane

console = Console()


class ConfigLoader:
    """Loads configuration from config.yaml and .env files"""

    def __init__(self, config_path: str = None, env_path: str = None):
        # Default to the working directory for config files
        if config_path is None:
            config_path = Path.cwd() / "config.yaml"
        if env_path is None:
            env_path = Path.cwd() / ".env"
        self.config_path = Path(config_path)
        self.env_path = Path(env_path)
        self.config_data = {}
        self.env_data = {}
        self._load_config()

    def _load_config(self):
        """Load configuration from both files"""
        # Load .env file
        if self.env_path.exists():
            load_dotenv(self.env_path)
        self.env_data = dict(os.environ)

        # Load config.yaml
        if self.config_path.exists():
            with open(self.config_path, 'r', encoding='utf-8') as f:
                self.config_data = yaml.safe_load(f) or {}
        else:
            console.print(f"[yellow]Warning: {escape(str(self.config_path))} not found, using defaults[/yellow]")
            self.config_data = {}

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value with environment variable override support"""
        # Check for environment variable override first
        env_key = key.upper().replace('.', '_')
        if env_key in self.env_data:
            return self.env_data[env_key]

        # Navigate through nested config
        value = self.config_data
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_records_path(self) -> Optional[Path]:
        """Path of the extracted todo records file (records.path / RECORDS_PATH)"""
        path = self.get('records.path')
        return Path(path) if path else None

    def get_default_pane(self) -> str:
        """Pane shown when none is given (view.default_pane / VIEW_DEFAULT_PANE)"""
        return str(self.get('view.default_pane', TodoItemViewPane.TODAY.value)).lower()

    def get_default_filter(self) -> str:
        """Filter applied when none is given (view.filter / VIEW_FILTER)"""
        value = self.get('view.filter', '')
        return '' if value is None else str(value)

    def validate_config(self) -> list:
        """Validate configuration and return list of errors"""
        errors = []

        panes = [pane.value for pane in TodoItemViewPane]
        if self.get_default_pane() not in panes:
            errors.append(f"Unknown default pane '{self.get_default_pane()}' (expected one of: {', '.join(panes)})")

        records_path = self.get_records_path()
        if records_path is None:
            errors.append("Records file not configured (set records.path in config.yaml or RECORDS_PATH env var)")
        elif not records_path.exists():
            errors.append(f"Records file not found: {records_path}")

        return errors

    def print_config_summary(self):
        """Print a summary of the current configuration"""
        console.print("[bold cyan]Configuration Summary:[/bold cyan]")
        console.print(f"  Config File: {escape(str(self.config_path))} ({'found' if self.config_path.exists() else 'missing'})")
        console.print(f"  Records Path: {escape(str(self.get_records_path() or 'not set'))}")
        console.print(f"  Default Pane: {self.get_default_pane()}")
        console.print(f"  Default Filter: {escape(self.get_default_filter() or '(none)')}")

# Global config loader instance
_config_loader: Optional[ConfigLoader] = None

def get_config_loader() -> ConfigLoader:
    """Get the global config loader instance"""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader

def reload_config():
    """Reload configuration from files"""
    global _config_loader
    _config_loader = None
    return get_config_loader()
