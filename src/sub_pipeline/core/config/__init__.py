# src/sub_pipeline/core/config/__init__.py

"""
Camada de configuração do sub-pipeline.

Este pacote contém as estruturas e utilitários responsáveis por carregar,
mesclar, validar estruturalmente e identificar definições de pipeline.

Responsabilidades do pacote:
    - Carregamento de definições (base + overrides locais) em YAML ou JSON
    - Resolução da definição final via deep-merge determinístico
    - Validação do registro de configuração aceito por `Pipeline.from_config`
    - Geração de hash canônico para rastreabilidade

Limites explícitos:
    - Não serializa implementações de Steps
    - Não executa pipeline
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    ConfigurationError,
    DefinitionNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import DEFINITION_FILE_KEYS, RECOGNIZED_KEYS, load_config, validate_config_record
from .merge import deep_merge

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "ConfigurationError",
    "DefinitionNotFoundError",
    "InvalidConfigRootTypeError",
    "UnsupportedConfigFormatError",
    "DEFINITION_FILE_KEYS",
    "RECOGNIZED_KEYS",
    "compute_config_hash",
    "deep_merge",
    "load_config",
    "validate_config_record",
]
