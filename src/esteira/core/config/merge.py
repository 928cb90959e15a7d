# src/esteira/core/config/merge.py
"""
Deep-merge determinístico de configuração.

Política de merge:
    - dict + dict → merge recursivo por chave
    - list        → sobrescrita total
    - escalar     → sobrescrita direta
    - tipos incompatíveis → `ConfigTypeConflictError`

Invariantes:
    - Nenhum input é mutado
    - A mesma entrada sempre produz a mesma saída
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, List

from .errors import ConfigTypeConflictError


def _merge_value(path: List[str], base_value: Any, override_value: Any) -> Any:
    if isinstance(base_value, dict) and isinstance(override_value, dict):
        return _merge_dicts(path, base_value, override_value)

    if isinstance(override_value, list):
        return deepcopy(override_value)

    # None funciona como "não definido" nos dois lados (ex.: run_id: null)
    if base_value is not None and override_value is not None and type(base_value) is not type(override_value):
        raise ConfigTypeConflictError(
            f"Conflito de tipo em '{'.'.join(path)}': "
            f"{type(base_value).__name__} vs {type(override_value).__name__}"
        )

    return deepcopy(override_value)


def _merge_dicts(path: List[str], base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    result: Dict[str, Any] = deepcopy(base)
    for key, override_value in override.items():
        if key in result:
            result[key] = _merge_value(path + [str(key)], result[key], override_value)
        else:
            result[key] = deepcopy(override_value)
    return result


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Combina `base` (defaults) com `override` (local) sem mutar nenhum dos dois.

    Raises:
        ConfigTypeConflictError: Raiz não-dict ou conflito de tipo por chave.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )
    return _merge_dicts([], base, override)
