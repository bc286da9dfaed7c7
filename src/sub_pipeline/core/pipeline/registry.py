# src/sub_pipeline/core/pipeline/registry.py
"""
Registro de implementações de Steps do pipeline.

Este módulo define o `StepRegistry`, o mapeamento nome → invocável
mantido por um pipeline.

Responsabilidades do módulo:
    - Rejeitar implementações não invocáveis no momento da atribuição
    - Expor acesso controlado às implementações registradas
    - Servir de função de lookup para o engine

Decisões arquiteturais:
    - Reatribuir um nome substitui a implementação anterior
    - Um nome pode ser listado na ordem sem estar registrado (vínculo tardio)
    - O registry não conhece a ordem de execução

Limites explícitos:
    - Não executa Steps
    - Não valida assinaturas
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional

from ..config.errors import ConfigurationError
from ..exceptions import InvalidStepError
from .step import is_step


@dataclass
class StepRegistry:
    """
    Mapeamento canônico nome → implementação de Step.

    Invariantes:
        - Todo valor armazenado é invocável
        - Nomes são strings não vazias
    """

    _steps: Dict[str, Callable] = field(default_factory=dict, init=False, repr=False)

    def set(self, name: str, step: Callable) -> Callable:
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError(f"Nome de Step deve ser uma string não vazia, recebido: {name!r}")
        if not is_step(step):
            raise InvalidStepError(step=name, received=type(step).__name__)

        self._steps[name] = step
        return step

    def get(self, name: str) -> Optional[Callable]:
        return self._steps.get(name)

    def remove(self, name: str) -> Callable:
        return self._steps.pop(name)

    def names(self) -> List[str]:
        return list(self._steps)

    def __contains__(self, name: object) -> bool:
        return name in self._steps

    def __iter__(self) -> Iterator[str]:
        return iter(self._steps)

    def __len__(self) -> int:
        return len(self._steps)
