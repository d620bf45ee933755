"""Data loaders: registry, built-in parsers and file resolution."""

from basedata.loaders.builtin import json_loader, yaml_loader
from basedata.loaders.files import expand_braces, has_glob, resolve_files
from basedata.loaders.registry import Loader, LoaderRegistry, format_ext

__all__ = [
    "Loader",
    "LoaderRegistry",
    "format_ext",
    "json_loader",
    "yaml_loader",
    "expand_braces",
    "has_glob",
    "resolve_files",
]
