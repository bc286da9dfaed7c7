# src/sub_pipeline/core/config/hashing.py
"""
Hash canônico de definições de pipeline.

Gera uma identidade estável para a definição de um pipeline (ordem,
comportamento de sucesso e nomes de Steps), usada para rastrear qual
definição produziu uma chamada.

Política de hashing (v1):
    - Serialização JSON canônica
    - Ordenação estável de chaves
    - Separadores compactos
    - Codificação UTF-8
    - Algoritmo SHA-256
"""

import hashlib
import json
from typing import Any, Dict


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Calcula o hash SHA-256 de uma definição de pipeline.

    Definições estruturalmente equivalentes produzem o mesmo hash,
    independentemente da ordem original das chaves. A ordem de Steps
    (uma lista) faz parte da identidade.

    Args:
        config (Dict[str, Any]): Definição serializável do pipeline.

    Returns:
        str: Hash SHA-256 hexadecimal (64 caracteres).

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """

    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
