"""A namespaced data cache fed by mappings and data files."""

from basedata.app import App, data_plugin
from basedata.config.options import DataOptions
from basedata.errors.exceptions import BaseDataError, FileReadError, InvalidKeyError, LoaderError
from basedata.loaders.builtin import json_loader, yaml_loader
from basedata.loaders.registry import LoaderRegistry
from basedata.store import DataStore

__all__ = [
    "App",
    "DataStore",
    "DataOptions",
    "LoaderRegistry",
    "data_plugin",
    "json_loader",
    "yaml_loader",
    "BaseDataError",
    "FileReadError",
    "InvalidKeyError",
    "LoaderError",
]
