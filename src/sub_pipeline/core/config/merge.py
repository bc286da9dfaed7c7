# src/sub_pipeline/core/config/merge.py
"""
Deep-merge de definições de pipeline.

Combina uma definição base de pipeline com overrides locais (ex.: trocar
a ordem dos Steps ou o comportamento de sucesso em um ambiente
específico).

Regras:
    - mapeamento + mapeamento → merge recursivo por chave
    - lista + lista → a lista do override substitui a base inteira
      (a ordem de Steps nunca é mesclada elemento a elemento)
    - mesmo tipo escalar → vale o override
    - tipos diferentes → `ConfigTypeConflictError` com o caminho da chave

Base e override nunca são mutados.
"""

from copy import deepcopy
from typing import Any, Dict, Tuple

from .errors import ConfigTypeConflictError


def _merge_value(path: Tuple[str, ...], current: Any, incoming: Any) -> Any:
    if isinstance(current, dict) and isinstance(incoming, dict):
        merged = dict(current)
        for key, value in incoming.items():
            merged[key] = (
                _merge_value(path + (str(key),), merged[key], value)
                if key in merged
                else deepcopy(value)
            )
        return merged

    if isinstance(current, list) and isinstance(incoming, list):
        return deepcopy(incoming)

    if type(current) is not type(incoming):
        raise ConfigTypeConflictError(
            f"Conflito de tipo em '{'.'.join(path) or '<raiz>'}': "
            f"{type(current).__name__} vs {type(incoming).__name__}"
        )

    return deepcopy(incoming)


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Aplica `override` sobre `base` e devolve uma nova definição.

    Raises:
        ConfigTypeConflictError: Se a raiz não for dict ou se uma chave
            mudar de tipo entre base e override.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            "Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )
    return _merge_value((), deepcopy(base), override)
