from .config_data import ConfigData

__all__ = ["ConfigData"]
