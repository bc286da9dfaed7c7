# src/sub_pipeline/core/config/loader.py
"""
Loader canônico de definições de pipeline.

Este módulo é responsável por carregar e validar estruturalmente o
registro de configuração aceito por `Pipeline.from_config`.

Uma definição em arquivo descreve apenas dados declarativos:
    - `order`: nomes dos Steps, na ordem de execução
    - `on_success`: comportamento de sucesso
    - `name`: rótulo do pipeline (opcional)

Implementações de Steps (invocáveis) nunca são serializadas; após o
carregamento elas são vinculadas via `Pipeline.load_from_namespace`.

A definição é resolvida a partir de:
    - um arquivo base (obrigatório)
    - um arquivo local de overrides (opcional)

Princípios fundamentais:
    - Nenhuma heurística implícita é aplicada
    - Chaves desconhecidas são rejeitadas
    - A mesma entrada sempre produz a mesma definição final
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional
import json

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    ConfigurationError,
    DefinitionNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)


RECOGNIZED_KEYS = frozenset({"order", "pipe", "steps", "on_success", "name"})
# implementações nunca vêm de arquivo; são vinculadas via load_from_namespace
DEFINITION_FILE_KEYS = frozenset({"order", "on_success", "name"})


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de definição e valida sua estrutura básica.

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        DefinitionNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise DefinitionNotFoundError(f"Arquivo de definição não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_config(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a definição efetiva de um pipeline.

    Quando presente, o arquivo local tem prioridade sobre a base
    (via `deep_merge`). Um arquivo local inexistente é ignorado.

    Args:
        defaults_path (str): Caminho para a definição base.
        local_path (Optional[str]): Caminho opcional para overrides locais.

    Returns:
        Dict[str, Any]: Definição final, já validada por `validate_config_record`.

    Raises:
        DefinitionNotFoundError: Se a definição base não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
        ConfigurationError: Se a definição final contiver chaves desconhecidas
            ou implementações de Steps (`pipe`/`steps`).
    """

    effective = _load_file(Path(defaults_path))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, _load_file(local_file))

    validate_config_record(effective)

    embedded = sorted(set(effective) - DEFINITION_FILE_KEYS)
    if embedded:
        raise ConfigurationError(
            f"Definições em arquivo não carregam implementações de Steps: {embedded} "
            "(use Pipeline.load_from_namespace)"
        )
    return effective


def validate_config_record(record: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Valida o registro de configuração de um pipeline e o normaliza.

    Regras:
        - o registro deve ser um mapeamento
        - apenas `order`, `pipe`, `steps`, `on_success` e `name` são aceitos
        - `pipe` e `steps` são sinônimos e não podem coexistir
        - `order` deve ser uma sequência de strings (não uma string)
        - `pipe`/`steps` deve ser um mapeamento

    A validação do valor de `on_success` é responsabilidade de
    `SuccessBehavior.coerce`, chamada pelo próprio pipeline.

    Returns:
        Dict[str, Any]: Registro normalizado com as chaves
        `order`, `steps`, `on_success` e `name`.

    Raises:
        ConfigurationError: Se qualquer regra for violada.
    """
    if not isinstance(record, Mapping):
        raise ConfigurationError(
            f"Registro de configuração deve ser um mapeamento, recebido: {type(record).__name__}"
        )

    unknown = sorted(set(record) - RECOGNIZED_KEYS)
    if unknown:
        raise ConfigurationError(f"Chaves de configuração desconhecidas: {unknown}")

    if "pipe" in record and "steps" in record:
        raise ConfigurationError("Use 'pipe' ou 'steps', não ambos")

    order = record.get("order") or []
    if not isinstance(order, (list, tuple)) or not all(isinstance(n, str) for n in order):
        raise ConfigurationError("'order' deve ser uma sequência de nomes de Steps")

    steps = record.get("pipe", record.get("steps")) or {}
    if not isinstance(steps, Mapping):
        raise ConfigurationError("'pipe'/'steps' deve ser um mapeamento nome -> invocável")

    return {
        "order": list(order),
        "steps": dict(steps),
        "on_success": record.get("on_success"),
        "name": record.get("name"),
    }
