import os
import threading
import configparser
from enum import StrEnum

import platformdirs

from .logger import setup_logger
from .models import Edge
from .spring import SpringConfig


def get_config_path():
    """Get the path for storing configuration files"""
    config_dir = platformdirs.user_config_dir("EdgeSheet", "EdgeSheet")
    os.makedirs(config_dir, exist_ok=True)
    return os.path.join(config_dir, "config.ini")


class SettingName(StrEnum):
    EDGE = "Edge"
    CLOSE_ON_CLICK = "CloseOnClick"
    MASS = "Mass"
    TENSION = "Tension"
    FRICTION = "Friction"
    CONSOLE_LEVEL = "ConsoleLevel"


DEFAULT_SETTINGS = {
    "Sheet": {
        SettingName.EDGE: Edge.RIGHT.value,
        SettingName.CLOSE_ON_CLICK: "true",
    },
    "Animation": {
        SettingName.MASS: "1",
        SettingName.TENSION: "185",
        SettingName.FRICTION: "26",
    },
    "Logging": {
        SettingName.CONSOLE_LEVEL: "INFO",
    },
}


class ConfigManager(configparser.ConfigParser):
    _instance = None
    _lock = threading.Lock()

    def __new__(cls, *args, **kwargs):
        with cls._lock:
            if cls._instance is None:
                cls._instance = super(ConfigManager, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        with self._lock:
            if hasattr(self, "initialized"):
                return

            super().__init__()
            self.logger = setup_logger()
            self.config_path = get_config_path()
            self.read(self.config_path)

            # Fill in any section or key missing from an older config
            changed = False
            for section, values in DEFAULT_SETTINGS.items():
                if not self.has_section(section):
                    self.add_section(section)
                for key, value in values.items():
                    if key not in self[section]:
                        self[section][key] = value
                        changed = True
            if changed:
                self.save()

            self.initialized = True

    def save(self):
        with open(self.config_path, "w") as configfile:
            self.write(configfile)

    def update_setting(self, section: str, key: SettingName, value):
        self.logger.debug(f"Updating {section}.{key} to {value}.")
        self[section][key] = str(value)
        self.save()

    def get_edge(self) -> Edge:
        raw = self["Sheet"].get(SettingName.EDGE, Edge.RIGHT.value)
        try:
            return Edge(raw.strip().lower())
        except ValueError:
            self.logger.warning(f"Unknown sheet edge '{raw}' in config, using right")
            return Edge.RIGHT

    def get_close_on_click(self) -> bool:
        return self["Sheet"].getboolean(SettingName.CLOSE_ON_CLICK, fallback=True)

    def get_spring_config(self) -> SpringConfig:
        section = self["Animation"]
        return SpringConfig(
            mass=section.getfloat(SettingName.MASS, fallback=1.0),
            tension=section.getfloat(SettingName.TENSION, fallback=185.0),
            friction=section.getfloat(SettingName.FRICTION, fallback=26.0),
        )

    def get_console_level(self) -> str:
        return self["Logging"].get(SettingName.CONSOLE_LEVEL, "INFO").upper()


def get_config_manager() -> ConfigManager:
    return ConfigManager()
