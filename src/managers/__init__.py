"""
Managers for configuration
"""

from .config_manager import ConfigManager, parse_enum

__all__ = ['ConfigManager', 'parse_enum']
