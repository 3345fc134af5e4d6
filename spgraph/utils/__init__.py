"""Utility helpers used across spgraph.

Small, self-contained utilities that do not depend on project internals.
"""

from spgraph.utils.yaml_utils import normalize_yaml_dict_keys

__all__ = [
    "normalize_yaml_dict_keys",
]
