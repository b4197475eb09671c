"""Wunderlist account backup tools."""

from wunderlist_backup.api import WunderlistApi
from wunderlist_backup.backup import Backup
from wunderlist_backup.config import ConfigurationError, Credentials
from wunderlist_backup.exporter import run_export
from wunderlist_backup.protocols import ApiProtocol
from wunderlist_backup.resources import ResourceKind

__all__ = [
    "ApiProtocol",
    "Backup",
    "ConfigurationError",
    "Credentials",
    "ResourceKind",
    "WunderlistApi",
    "run_export",
]
