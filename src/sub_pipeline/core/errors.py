"""
sub-pipeline — Canonical Error Structures (v1)

Este módulo define o payload canônico usado para descrever falhas no
Event Log de uma chamada de pipeline.

O payload é apenas descritivo: o engine nunca substitui a exceção
original por ele. Exceções de Steps continuam sendo propagadas ao
chamador sem modificação.

Payloads devem ser:

- explícitos
- serializáveis
- rastreáveis
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .exceptions import StepMissing


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineErrorPayload:
    """
    Payload canônico de erro de uma chamada de pipeline.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

STEP_MISSING = "STEP_MISSING"
STEP_FAILED = "STEP_FAILED"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def step_missing(
    *,
    step: str,
    pipeline: Optional[str] = None,
    hint: str = "Registre o Step com set_step() ou carregue-o via load_from_namespace() antes da chamada.",
) -> PipelineErrorPayload:
    return PipelineErrorPayload(
        type=STEP_MISSING,
        message="Step ausente no pipeline",
        details={
            "step": step,
            "pipeline": pipeline,
        },
        hint=hint,
    )


def step_failed(
    *,
    step: str,
    exc: BaseException,
    pipeline: Optional[str] = None,
    hint: str = "A exceção original foi propagada ao chamador sem modificação.",
) -> PipelineErrorPayload:
    return PipelineErrorPayload(
        type=STEP_FAILED,
        message=str(exc) or "Falha durante execução do Step",
        details={
            "step": step,
            "pipeline": pipeline,
            "exception_class": exc.__class__.__name__,
        },
        hint=hint,
    )


def exception_to_payload(*, step: str, exc: BaseException, pipeline: Optional[str] = None) -> PipelineErrorPayload:
    """Converte uma exceção em payload (sem stack trace)."""
    if isinstance(exc, StepMissing):
        return step_missing(step=exc.step, pipeline=pipeline)
    return step_failed(step=step, exc=exc, pipeline=pipeline)
