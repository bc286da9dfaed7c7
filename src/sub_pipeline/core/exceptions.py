"""
sub-pipeline — Sinais e exceções canônicas (v1)

Este módulo define os sinais de controle de fluxo e as exceções tipadas
levantadas pelo pipeline, pelo engine e pelo adapter de namespaces.

Sinais (não são erros de execução):
- Success     → levantado por um Step para encerrar o pipeline com sucesso
- StepMissing → levantado pelo engine quando um Step nomeado não resolve

Erros:
- InvalidStepError     → implementação de Step não invocável (TypeError)
- NamespaceLookupError → Step ausente no namespace externo (LookupError)
- CollisionError       → nome já existente no namespace de destino

Regras:
- Exceções carregam apenas dados estruturados.
- Nenhuma exceção é encapsulada ou convertida pelo engine.
- As instâncias continuam mutáveis como qualquer exceção: o interpretador,
  `contextlib` e `add_note` escrevem `__traceback__`/`__notes__` nelas.
- `args` espelha os campos, de modo que `pickle` e `copy` reconstroem a
  exceção.
- Igualdade e hash são por identidade, como em qualquer exceção.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


class _FieldArgs:
    """Preenche `BaseException.args` com os campos do dataclass."""

    def __post_init__(self) -> None:
        super().__init__(*(getattr(self, f.name) for f in fields(self)))


@dataclass(eq=False)
class Success(_FieldArgs, Exception):
    """Sinal de término antecipado e bem-sucedido do pipeline.

    Um Step levanta `Success` para indicar que o pipeline terminou.
    O valor carregado é opaco para o engine e entregue ao chamador
    conforme o `SuccessBehavior` configurado.
    """

    value: Any = None

    def __str__(self) -> str:  # pragma: no cover
        return f"pipeline succeeded with {self.value!r}"


@dataclass(eq=False)
class StepMissing(_FieldArgs, Exception):
    """Step listado na ordem não resolve para um invocável.

    Levantado pelo engine (nunca por código de usuário) durante a
    validação ou a execução. `step` carrega apenas o primeiro nome
    ausente; ausências posteriores não são agregadas.
    """

    step: str

    def __str__(self) -> str:  # pragma: no cover
        return f"pipeline step is missing: {self.step!r}"


@dataclass(eq=False)
class InvalidStepError(_FieldArgs, TypeError):
    """Valor atribuído como Step não é invocável."""

    step: str
    received: str

    def __str__(self) -> str:  # pragma: no cover
        return f"step {self.step!r} must be callable, received {self.received}"


@dataclass(eq=False)
class NamespaceLookupError(_FieldArgs, LookupError):
    """Namespace externo não possui um Step requerido pela ordem."""

    step: str
    namespace: str

    def __str__(self) -> str:  # pragma: no cover
        return f"namespace {self.namespace} has no step {self.step!r}"


@dataclass(eq=False)
class CollisionError(_FieldArgs, Exception):
    """Nome já existe no namespace de destino e overwrite não foi pedido."""

    name: str
    namespace: str

    def __str__(self) -> str:  # pragma: no cover
        return (
            f"namespace {self.namespace} already defines {self.name!r} "
            "(pass allow_overwrite=True to replace it)"
        )
