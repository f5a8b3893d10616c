from .inspector import MappingInspector, load_configurator

__all__ = ["MappingInspector", "load_configurator"]
