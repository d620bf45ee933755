"""Configuration: package defaults and option layering."""

from basedata.config.defaults import DEFAULT_CACHE_PATH, get_defaults
from basedata.config.options import DataOptions, resolve_options

__all__ = ["DEFAULT_CACHE_PATH", "DataOptions", "get_defaults", "resolve_options"]
