"""Utilities for handling YAML parsing quirks."""

from typing import Any, Dict, TypeVar

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Normalize dictionary keys from YAML parsing to plain strings.

    YAML 1.1 boolean keys (e.g., true, false, yes, no, on, off) are parsed as
    Python True/False. They are converted to "True"/"False" and every other key
    is passed through ``str``, so documents can be checked for known keys by
    name.

    Args:
        data: Dictionary that may contain boolean or other non-string keys.

    Returns:
        Dictionary with all keys converted to strings.

    Examples:
        >>> normalize_yaml_dict_keys({True: 1, "edges": []})
        {'True': 1, 'edges': []}
    """
    return {str(key): value for key, value in data.items()}
