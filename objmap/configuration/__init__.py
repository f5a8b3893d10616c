from .options import Options
from .mapping import Mapping
from .auto_mapper_config import AutoMapperConfig

__all__ = ["Options", "Mapping", "AutoMapperConfig"]
