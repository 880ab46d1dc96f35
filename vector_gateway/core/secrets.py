import os
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from vector_gateway.core.config import SECRET_NAMES
from vector_gateway.core.errors import ConfigError


def env_secrets() -> Dict[str, str]:
    return {name: os.environ[name] for name in SECRET_NAMES if os.environ.get(name)}


class SecretStore:
    """
    Holder of the upstream secrets (vector DB URL and key, embedding URL).

    Filled exactly once at startup, read-only afterwards, so concurrent
    requests read it without any locking.
    """

    def __init__(self):
        self._values: Optional[Mapping[str, str]] = None

    def set(self, values: Mapping[str, str]) -> None:
        if self._values is not None:
            raise RuntimeError("SecretStore has already been populated")
        self._values = MappingProxyType(dict(values))

    def get(self, name: str) -> Optional[str]:
        if self._values is None:
            return None
        return self._values.get(name)

    def require(self, name: str) -> str:
        value = self.get(name)
        if not value:
            raise ConfigError(f"{name} not found in secrets")
        return value

    @property
    def loaded(self) -> bool:
        return self._values is not None

    @classmethod
    def from_env(cls) -> "SecretStore":
        store = cls()
        store.set(env_secrets())
        return store
