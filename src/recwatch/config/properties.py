"""Named string properties (credentials and destinations).

Missing properties are not errors: callers decide whether a missing value
disables a feature.
"""

import os
from collections.abc import Mapping
from typing import Protocol

RECIPIENT_EMAIL = "RECIPIENT_EMAIL"
SLACK_WEB_HOOK_URL = "SLACK_WEB_HOOK_URL"
SMTP_PASSWORD = "SMTP_PASSWORD"


class PropertyStore(Protocol):
    """Read-only access to named string properties."""

    def get_property(self, name: str) -> str | None: ...


class EnvironmentProperties:
    """Properties read from the process environment."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get_property(self, name: str) -> str | None:
        value = self._environ.get(name)
        return value if value else None


class FileProperties:
    """Properties loaded from a mapping (e.g. properties.yaml)."""

    def __init__(self, values: Mapping[str, object] | None = None) -> None:
        self._values = {
            str(k): str(v) for k, v in (values or {}).items() if v is not None
        }

    def get_property(self, name: str) -> str | None:
        value = self._values.get(name)
        return value if value else None


class ChainedProperties:
    """First store returning a non-empty value wins."""

    def __init__(self, *stores: PropertyStore) -> None:
        self.stores = stores

    def get_property(self, name: str) -> str | None:
        for store in self.stores:
            value = store.get_property(name)
            if value:
                return value
        return None
