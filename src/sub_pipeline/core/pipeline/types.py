# src/sub_pipeline/core/pipeline/types.py
"""
Tipos canônicos do pipeline do sub-pipeline.

Este módulo define as estruturas e enums fundamentais que padronizam
a comunicação entre Steps, engine e chamador.

Componentes principais:
    - SuccessBehavior → política de entrega de um `Success` ao chamador
    - OutcomeTag      → classificação do resultado de uma invocação de Step
    - StepOutcome     → resultado imutável e rotulado de uma invocação

Princípios fundamentais:
    - Enums possuem valores textuais canônicos
    - O loop do engine ramifica sobre `OutcomeTag`, não sobre tipos de exceção
    - Nenhuma lógica de execução vive neste módulo
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..config.errors import ConfigurationError
from ..exceptions import Success


_ALIASES = {
    # grafias camelCase
    "returnOutcome": "return_outcome",
    "returnValue": "return_value",
    # grafias curtas históricas
    "throw": "propagate",
    "return": "return_outcome",
    "value": "return_value",
}


class SuccessBehavior(str, Enum):
    """
    Comportamento aplicado quando um Step levanta `Success`.

    Modos definidos:
        - PROPAGATE: o `Success` é relançado ao chamador
        - RETURN_OUTCOME: o próprio objeto `Success` é retornado
        - RETURN_VALUE: apenas `Success.value` é retornado (padrão)

    Além dos valores canônicos, `coerce` aceita as grafias camelCase
    (`returnOutcome`, `returnValue`) e as grafias curtas `throw`,
    `return` e `value`.
    """
    PROPAGATE = "propagate"
    RETURN_OUTCOME = "return_outcome"
    RETURN_VALUE = "return_value"

    @classmethod
    def coerce(cls, value: Any) -> "SuccessBehavior":
        """Converte `value` em um modo reconhecido ou levanta `ConfigurationError`."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(_ALIASES.get(value, value))
            except ValueError:
                pass
        raise ConfigurationError(
            f"Valor inválido para on_success: {value!r} "
            f"(esperado um de {[m.value for m in cls]})"
        )


DEFAULT_SUCCESS_BEHAVIOR = SuccessBehavior.RETURN_VALUE


class OutcomeTag(str, Enum):
    """
    Classificação do resultado de uma única invocação de Step.

    Estados definidos:
        - CONTINUE: o Step retornou normalmente
        - SUCCEED: o Step levantou `Success`
        - FAIL: o Step levantou qualquer outra exceção
    """
    CONTINUE = "continue"
    SUCCEED = "succeed"
    FAIL = "fail"


@dataclass(frozen=True)
class StepOutcome:
    """
    Resultado imutável e rotulado da invocação de um Step.

    Campos:
        - step: nome do Step invocado
        - tag: classificação do resultado
        - value: retorno do Step (CONTINUE)
        - success: sinal levantado pelo Step (SUCCEED)
        - error: exceção levantada pelo Step (FAIL)
    """
    step: str
    tag: OutcomeTag
    value: Any = None
    success: Optional[Success] = None
    error: Optional[BaseException] = None

    @classmethod
    def proceed(cls, step: str, value: Any = None) -> "StepOutcome":
        return cls(step=step, tag=OutcomeTag.CONTINUE, value=value)

    @classmethod
    def succeed(cls, step: str, success: Success) -> "StepOutcome":
        return cls(step=step, tag=OutcomeTag.SUCCEED, success=success)

    @classmethod
    def fail(cls, step: str, error: BaseException) -> "StepOutcome":
        return cls(step=step, tag=OutcomeTag.FAIL, error=error)
