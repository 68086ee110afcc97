import os
from dataclasses import dataclass, fields
from typing import Dict, Any

@dataclass
class CoreConfig:
    LOG_LEVEL: str = os.getenv("AIOS_LOG_LEVEL", "INFO")
    DEBUG: bool = os.getenv("AIOS_DEBUG", "0") == "1"

@dataclass
class BrainConfig:
    # Logical name the store is published under at boot
    SERVICE_NAME: str = os.getenv("AIOS_SERVICE_NAME", "aios_brain")

    # Thought log bound (oldest evicted first)
    THOUGHT_CAPACITY: int = int(os.getenv("AIOS_THOUGHT_CAPACITY", "1000"))

    # Identity entries seeded into every new store
    SYSTEM_NAME: str = "AIOS-Android"
    SYSTEM_VERSION: str = "4.0.1-AIOS"
    SYSTEM_TYPE: str = "AI Operating System"
    SYSTEM_LAYER: str = "Base OS Layer"

@dataclass
class ServerConfig:
    HOST: str = os.getenv("AIOS_HOST", "127.0.0.1")
    PORT: int = int(os.getenv("AIOS_PORT", "8000"))
    RELOAD: bool = os.getenv("AIOS_RELOAD", "0") == "1"


class Config:
    """Centralized configuration."""
    core = CoreConfig()
    brain = BrainConfig()
    server = ServerConfig()

    SECTIONS = ("core", "brain", "server")

    @classmethod
    def to_dict(cls) -> Dict[str, Any]:
        """Serialize all config sections to a flat dictionary."""
        result = {}
        for section_name in cls.SECTIONS:
            section = getattr(cls, section_name)
            for f in fields(section):
                result[f"{section_name}.{f.name}"] = getattr(section, f.name)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any], apply_env_overrides: bool = True):
        """
        Update config from a flat dictionary.
        If apply_env_overrides is True, environment variables take precedence.
        """
        for key, value in data.items():
            if "." not in key:
                continue
            section_name, field_name = key.split(".", 1)
            if section_name not in cls.SECTIONS:
                continue
            section = getattr(cls, section_name)
            if not hasattr(section, field_name):
                continue

            env_key = f"AIOS_{field_name}"
            if apply_env_overrides and env_key in os.environ:
                continue  # env var wins

            # Type conversion
            current_value = getattr(section, field_name)
            if isinstance(current_value, bool):
                value = str(value).lower() in ("1", "true", "yes")
            elif isinstance(current_value, int):
                value = int(value)
            elif isinstance(current_value, float):
                value = float(value)

            setattr(section, field_name, value)

    @classmethod
    def diff(cls, other_dict: Dict[str, Any]) -> Dict[str, tuple]:
        """
        Compare current config with another dict.
        Returns dict of {key: (current_value, other_value)} for differences.
        """
        current = cls.to_dict()
        differences = {}
        for key in set(current.keys()) | set(other_dict.keys()):
            curr_val = current.get(key)
            other_val = other_dict.get(key)
            if curr_val != other_val:
                differences[key] = (curr_val, other_val)
        return differences
