"""Decode, merge and prune helpers for option group values.

Pruning walks the value union recursively. Nested mappings and sequences
are cleaned first, then the emptiness check runs on the cleaned result, so
a mapping whose children were all removed disappears with them.
"""

import json
from collections.abc import Mapping
from typing import Any, Dict

from loguru import logger

from .types import UNSET_SENTINEL, OptionMapping, OptionValue


def is_empty_value(value: Any) -> bool:
    """Check whether a value should be dropped from a persisted group.

    Falsy values ("", 0, 0.0, False, None, empty containers), the string
    "0" and the "_unset_" sentinel are empty.
    """
    if isinstance(value, str) and value in (UNSET_SENTINEL, "0"):
        return True
    return not value


def _prune_value(value: OptionValue) -> OptionValue:
    if isinstance(value, Mapping):
        return prune_options(value)
    if isinstance(value, (list, tuple)):
        items = []
        for item in value:
            cleaned = _prune_value(item)
            if not is_empty_value(cleaned):
                items.append(cleaned)
        return items
    return value


def prune_options(values: Mapping) -> OptionMapping:
    """Return a copy of ``values`` with empty and sentinel entries removed at every depth."""
    pruned: Dict[str, OptionValue] = {}
    for key, value in values.items():
        cleaned = _prune_value(value)
        if is_empty_value(cleaned):
            continue
        pruned[key] = cleaned
    return pruned


def looks_serialized(value: Any) -> bool:
    """Check whether a value is a serialized JSON object rather than a mapping."""
    if isinstance(value, bytes):
        try:
            value = value.decode("utf-8")
        except UnicodeDecodeError:
            return False
    if not isinstance(value, str):
        return False
    text = value.strip()
    return text.startswith("{") and text.endswith("}")


def decode_options(raw: Any) -> OptionMapping:
    """Turn an incoming group value into a mapping.

    Mappings are copied, JSON text or bytes are decoded. Anything that does
    not yield a mapping is logged and treated as an empty mapping.
    """
    if raw is None:
        return {}
    if isinstance(raw, Mapping):
        return dict(raw)

    if isinstance(raw, (str, bytes)):
        if not raw.strip():
            return {}
        try:
            decoded = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Ignoring undecodable option payload: {e}")
            return {}
        if isinstance(decoded, dict):
            return decoded
        logger.warning(f"Ignoring option payload that is not a mapping: {type(decoded).__name__}")
        return {}

    logger.warning(f"Ignoring option payload of unsupported type {type(raw).__name__}")
    return {}


def merge_and_prune(current: Mapping, incoming: Any) -> OptionMapping:
    """Shallow-merge ``incoming`` over ``current`` and prune the result."""
    merged = dict(current)
    merged.update(decode_options(incoming))
    return prune_options(merged)
