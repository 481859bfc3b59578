# Settings package
from coffeeshop.settings.app_settings import AppSettings, DatabaseSettings, get_app_settings, get_database_settings

__all__ = ["AppSettings", "DatabaseSettings", "get_app_settings", "get_database_settings"]
