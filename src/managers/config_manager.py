"""
Config Manager

Loads config.yaml (optionally split via include:) into a ShowConfig.
Falls back to factory_defaults.yaml, then to built-in defaults.
"""

import yaml
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar
from models.config import ShowConfig, DEFAULT_PLAYLIST
from models.enums import GeneratorID, LogCategory, LogLevel
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.CONFIG)

E = TypeVar("E", bound=Enum)

SRC_DIR = Path(__file__).parent.parent


def parse_enum(enum_class: Type[E], name: Any) -> Optional[E]:
    """
    Case-insensitive lookup of an enum member by name

    Accepts "game_of_life", "GAME_OF_LIFE" and "game-of-life".

    Returns:
        Enum member, or None if the name does not match any member
    """
    if not isinstance(name, str):
        return None

    key = name.strip().upper().replace("-", "_")
    for member in enum_class:
        if member.name == key:
            return member
    return None


class ConfigManager:
    """
    Show configuration loader

    Example:
        config = ConfigManager().load()
        config.run_duration_s   # 60.0
        config.playlist         # [GeneratorID.HEXAGONS, ...]
    """

    def __init__(self, config_path="config/config.yaml", defaults_path="config/factory_defaults.yaml"):
        """
        Args:
            config_path: Path to main config.yaml (relative to src/ unless absolute)
            defaults_path: Path to factory defaults fallback
        """
        self.config_path = self._resolve(config_path)
        self.factory_defaults_path = self._resolve(defaults_path)
        self.data: Dict = {}
        self.config: Optional[ShowConfig] = None

    @staticmethod
    def _resolve(path) -> Path:
        path = Path(path)
        return path if path.is_absolute() else SRC_DIR / path

    def load(self) -> ShowConfig:
        """
        Load and validate configuration

        Process:
        1. Load config.yaml (merging include: files if present)
        2. Fallback to factory_defaults.yaml on failure
        3. Fallback to built-in ShowConfig() if that fails too

        Returns:
            Validated ShowConfig
        """
        for path in (self.config_path, self.factory_defaults_path):
            try:
                self.data = self._load_file(path)
                self.config = self._build_config(self.data)
                log.info("Configuration loaded", path=str(path))
                return self.config
            except Exception as ex:
                log.error(f"Failed to load {path.name}", error=str(ex), error_type=type(ex).__name__)
                log.warn("Falling back to next configuration source")

        log.warn("Using built-in defaults")
        self.data = {}
        self.config = ShowConfig()
        return self.config

    def _load_file(self, path: Path) -> Dict:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping at top level, got {type(data).__name__}")

        if "include" in data:
            log.info("Using include-based configuration")
            merged = self._load_with_includes(data.pop("include"), path.parent)
            merged.update(data)
            return merged

        return data

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict:
        """Load and merge YAML files listed under include:"""
        merged = {}

        for filename in include_list:
            filepath = config_dir / filename
            with open(filepath, "r", encoding="utf-8") as f:
                file_data = yaml.safe_load(f)
            if file_data:
                merged.update(file_data)
                log.debug(f"Loaded {filename}", keys=str(list(file_data.keys())))

        return merged

    def _build_config(self, data: Dict) -> ShowConfig:
        """Map raw YAML values onto ShowConfig (ValueError on invalid values)"""
        defaults = ShowConfig()

        return ShowConfig(
            run_duration_s=float(data.get("run_duration_s", defaults.run_duration_s)),
            fade_duration_s=float(data.get("fade_duration_s", defaults.fade_duration_s)),
            frame_interval_ms=float(data.get("frame_interval_ms", defaults.frame_interval_ms)),
            debug_overlay=bool(data.get("debug_overlay", defaults.debug_overlay)),
            fade_easing=str(data.get("fade_easing", defaults.fade_easing)),
            log_level=self._parse_log_level(data.get("log_level")),
            playlist=self._parse_playlist(data.get("playlist")),
        )

    def _parse_log_level(self, value) -> LogLevel:
        if value is None:
            return LogLevel.INFO

        level = parse_enum(LogLevel, value)
        if level is None:
            log.warn("Unknown log_level, using INFO", value=value)
            return LogLevel.INFO
        return level

    def _parse_playlist(self, entries) -> List[GeneratorID]:
        """
        Parse playlist entries into GeneratorIDs

        Unknown entries are skipped with a warning. A missing playlist
        means the default one; a list with no valid entries is an error.
        """
        if entries is None:
            return list(DEFAULT_PLAYLIST)

        if not isinstance(entries, list):
            raise ValueError(f"playlist must be a list, got {type(entries).__name__}")

        playlist = []
        for entry in entries:
            gen_id = parse_enum(GeneratorID, entry)
            if gen_id is None:
                log.warn("Unknown generator in playlist, skipping", entry=entry)
                continue
            playlist.append(gen_id)

        if not playlist:
            raise ValueError("Playlist must contain at least one generator")

        return playlist
