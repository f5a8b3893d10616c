"""Application configuration."""
import os
from dataclasses import dataclass


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class MapperDefaultsConfig:
    """Default options template for new mappings."""

    source_naming: str = ""  # "snake", "camel", "pascal" or empty
    destination_naming: str = ""
    skip_constructor: bool = False
    ignore_null_properties: bool = False

    @classmethod
    def from_env(cls) -> "MapperDefaultsConfig":
        """Load config from environment variables."""
        return cls(
            source_naming=os.getenv("OBJMAP_SOURCE_NAMING", ""),
            destination_naming=os.getenv("OBJMAP_DESTINATION_NAMING", ""),
            skip_constructor=_env_flag("OBJMAP_SKIP_CONSTRUCTOR"),
            ignore_null_properties=_env_flag("OBJMAP_IGNORE_NULL"),
        )


@dataclass
class AppConfig:
    """Application configuration."""

    log_level: str = "WARNING"
    mapper_defaults: MapperDefaultsConfig = None

    def __post_init__(self):
        """Initialize default values."""
        if self.mapper_defaults is None:
            self.mapper_defaults = MapperDefaultsConfig.from_env()

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load config from environment variables."""
        return cls(
            log_level=os.getenv("OBJMAP_LOG_LEVEL", "WARNING"),
            mapper_defaults=MapperDefaultsConfig.from_env(),
        )


# Global instance
app_config = AppConfig.from_env()
