"""Option layering for data loads.

Precedence (later overrides earlier):
  1. Package defaults
  2. Plugin defaults  (passed to ``use_data``)
  3. Host options     (``App.options``)
  4. Call-site options
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from basedata.config.defaults import get_defaults

RenameFn = Callable[[str], str]

# camelCase spellings accepted on input
_ALIASES: dict[str, str] = {
    "renameKey": "rename_key",
}


class DataOptions(BaseModel):
    """Resolved options for one ``data()`` file load."""

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        populate_by_name=True,
        extra="allow",
    )

    namespace: bool | str | RenameFn | None = None
    rename_key: RenameFn | None = Field(default=None, alias="renameKey")
    cwd: str | None = None
    ignore: list[str] = Field(default_factory=list)
    dot: bool = False

    @property
    def namespaced(self) -> bool:
        return bool(self.namespace) or self.rename_key is not None


def resolve_options(*layers: Mapping[str, Any] | DataOptions | None) -> DataOptions:
    """Merge option layers into a single validated ``DataOptions``.

    ``None`` layers are skipped and ``None`` values never override an
    earlier layer.
    """
    merged = get_defaults()
    for layer in layers:
        if layer is None:
            continue
        if isinstance(layer, DataOptions):
            layer = layer.model_dump(exclude_unset=True)
        for key, value in layer.items():
            if value is None:
                continue
            merged[_ALIASES.get(key, key)] = value
    return DataOptions(**merged)


def is_options(value: Any) -> bool:
    """True if ``value`` can be treated as call-site load options."""
    return isinstance(value, (DataOptions, Mapping))
