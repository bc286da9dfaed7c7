# src/sub_pipeline/core/engine/planner.py
"""
Planejador de execução do pipeline.

Este módulo resolve, sem executar nada, cada nome da ordem de execução
para sua implementação, usando a mesma função de lookup que o engine
usa durante a chamada.

Princípios fundamentais:
    - A ordem declarada é a ordem de execução (sem reordenação)
    - Nomes duplicados são permitidos e aparecem uma vez por ocorrência
    - O primeiro nome não resolvido interrompe o planejamento

Limites explícitos:
    - Não executa Steps
    - Não agrega múltiplos Steps ausentes
    - Não valida assinaturas
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Tuple

from ..exceptions import StepMissing
from ..pipeline.step import is_step


Lookup = Callable[[str], Optional[Callable]]


def resolve_step(name: str, lookup: Lookup) -> Callable:
    """
    Resolve um único Step pelo nome.

    Raises:
        StepMissing: Se o lookup não retornar um invocável.
    """
    step = lookup(name)
    if not is_step(step):
        raise StepMissing(step=name)
    return step


def plan_steps(order: Iterable[str], lookup: Lookup) -> List[Tuple[str, Callable]]:
    """
    Resolve toda a ordem de execução sem invocar nenhum Step.

    Args:
        order (Iterable[str]): Nomes dos Steps, na ordem de execução.
        lookup (Lookup): Função nome -> invocável (ou None).

    Returns:
        List[Tuple[str, Callable]]: Pares (nome, implementação) na ordem declarada.

    Raises:
        StepMissing: Para o primeiro nome não resolvido.
    """
    return [(name, resolve_step(name, lookup)) for name in order]
