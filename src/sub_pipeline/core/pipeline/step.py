# src/sub_pipeline/core/pipeline/step.py
"""
Contrato canônico de Step do sub-pipeline.

Um Step é a menor unidade executável do pipeline: um invocável nomeado
que recebe os argumentos da chamada seguidos do `CallContext`.

Princípios fundamentais:
    - Steps não conhecem o engine nem a ordem de execução
    - A assinatura de um Step não é validada, apenas sua invocabilidade
    - Um Step encerra o pipeline com sucesso levantando `Success`
    - Qualquer outra exceção encerra a chamada e chega intacta ao chamador
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Step(Protocol):
    """
    Contrato mínimo de um Step.

    Qualquer invocável satisfaz o protocolo: funções, métodos,
    `functools.partial`, lambdas ou objetos que definem `__call__`.
    O último argumento posicional recebido é sempre o `CallContext`
    da chamada corrente.
    """

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        ...


def is_step(value: Any) -> bool:
    """Indica se `value` pode ser usado como implementação de Step."""
    return value is not None and callable(value)
