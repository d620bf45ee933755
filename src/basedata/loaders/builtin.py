"""Built-in data loaders.

A loader is called as ``fn(content, path)``. ``content`` is the raw file
text for the first loader in a chain, or the previous loader's output.
"""

from __future__ import annotations

import json
from typing import Any

import yaml


def json_loader(content: Any, path: str) -> Any:
    """Parse JSON text. Already-parsed input passes through."""
    if not isinstance(content, (str, bytes)):
        return content
    return json.loads(content)


def yaml_loader(content: Any, path: str) -> Any:
    """Parse YAML text safely. Already-parsed input passes through."""
    if not isinstance(content, (str, bytes)):
        return content
    return yaml.safe_load(content)
