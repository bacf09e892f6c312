"""Component metadata (component.yml) inference output and user overrides."""

from .overrides import OverrideError, load_override, override_path, parse_override
from .serializer import KEY_ORDER, SCHEMA_URL, MetadataSerializer, deep_merge, dump_yaml, order_keys

__all__ = [
    "KEY_ORDER",
    "MetadataSerializer",
    "OverrideError",
    "SCHEMA_URL",
    "deep_merge",
    "dump_yaml",
    "load_override",
    "order_keys",
    "override_path",
    "parse_override",
]
