from typing import Optional, Type
from pydantic import BaseModel

SCHEMA_REGISTRY : dict[str, dict[str, Type[BaseModel]]] = {}


def register(module_name, name):
    def wrapper(cls):
        SCHEMA_REGISTRY.setdefault(module_name, {})
        SCHEMA_REGISTRY[module_name][name] = cls
        return cls
    return wrapper


def load_schema(module_name: str, version: Optional[str] = None) -> Type[BaseModel]:
    """Look up a registered schema. Without a version, the newest one wins."""
    if version is None:
        return load_max_schema(module_name)
    try:
        return SCHEMA_REGISTRY[module_name][version]
    except KeyError:
        raise KeyError(f"No schema registered for {module_name}/{version}") from None


def load_max_schema(module_name: str) -> Type[BaseModel]:
    max_version = max(map(_parse_version, SCHEMA_REGISTRY[module_name].keys()))
    return SCHEMA_REGISTRY[module_name][_format_version(max_version)]


def _parse_version(version: str) -> int:
    return int(version.lstrip('v'))

def _format_version(version: int) -> str:
    return f'v{version}'
