from .settings import RenamerSettings, SettingsLoader, load_settings

__all__ = ["RenamerSettings", "SettingsLoader", "load_settings"]
