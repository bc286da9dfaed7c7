# src/sub_pipeline/core/engine/engine.py
"""
Engine de execução do pipeline do sub-pipeline.

O engine percorre a ordem de execução, resolve cada Step pelo nome
através de uma função de lookup fornecida pelo chamador, invoca o Step
e interpreta o resultado rotulado (`StepOutcome`).

A mesma rotina atende:
- a chamada direta de um `Pipeline` (lookup no registry do pipeline)
- a rotina `call` instalada em um namespace (lookup no namespace, no
  momento da chamada)
- pipelines de classe (lookup em `getattr(self, nome)`)

Regras de execução:
- Um `CallContext` novo é criado por chamada e anexado como último
  argumento posicional de todos os Steps.
- Step não resolvido → `StepMissing` imediatamente, sem rollback.
- `Success` → fim da caminhada; o `SuccessBehavior` decide a entrega.
- Qualquer outra exceção → propagada ao chamador sem modificação.
- Ordem esgotada sem `Success` → retorna `None`.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Sequence

from ..errors import exception_to_payload
from ..exceptions import StepMissing, Success
from ..pipeline.context import CallContext
from ..pipeline.types import OutcomeTag, StepOutcome, SuccessBehavior
from .planner import Lookup, resolve_step


def invoke_step(name: str, step: Callable, args: Sequence[Any], kwargs: Mapping[str, Any]) -> StepOutcome:
    """Invoca um Step e converte o resultado em `StepOutcome`."""
    try:
        value = step(*args, **kwargs)
    except Success as success:
        return StepOutcome.succeed(name, success)
    except Exception as exc:
        return StepOutcome.fail(name, exc)
    return StepOutcome.proceed(name, value)


def apply_success_behavior(success: Success, behavior: SuccessBehavior) -> Any:
    if behavior is SuccessBehavior.RETURN_VALUE:
        return success.value
    if behavior is SuccessBehavior.RETURN_OUTCOME:
        return success
    raise success


def run_steps(
    order: Iterable[str],
    success_behavior: Any,
    lookup: Lookup,
    args: Sequence[Any] = (),
    kwargs: Optional[Dict[str, Any]] = None,
    *,
    pipeline: str = "pipeline",
    ctx: Optional[CallContext] = None,
) -> Any:
    """
    Executa uma sequência de Steps nomeados.

    Args:
        order (Iterable[str]): Nomes dos Steps, na ordem de execução.
        success_behavior: `SuccessBehavior` (ou grafia aceita por `coerce`).
        lookup (Lookup): Função nome -> invocável (ou None), consultada
            no momento em que cada Step é alcançado.
        args (Sequence[Any]): Argumentos posicionais da chamada.
        kwargs (Optional[Dict[str, Any]]): Argumentos nomeados da chamada.
        pipeline (str): Rótulo usado no log de eventos.
        ctx (Optional[CallContext]): Contexto pré-criado (por padrão um novo).

    Returns:
        Any: Conforme o `SuccessBehavior` quando um Step levanta `Success`;
        `None` quando a ordem é esgotada sem `Success`.

    Raises:
        StepMissing: Para o primeiro Step não resolvido.
        Success: Quando o comportamento é PROPAGATE.
        Exception: A exceção original de um Step que falhou.
    """
    behavior = SuccessBehavior.coerce(success_behavior)
    if ctx is None:
        ctx = CallContext(pipeline=pipeline)
    call_args = [*args, ctx]
    call_kwargs = dict(kwargs or {})

    ctx.log(step=None, level="info", message="call.started", on_success=behavior.value)

    for name in order:
        try:
            step = resolve_step(name, lookup)
        except StepMissing as missing:
            ctx.log(
                step=name,
                level="error",
                message="step.missing",
                error=exception_to_payload(step=name, exc=missing, pipeline=ctx.pipeline).to_dict(),
            )
            raise

        ctx.log(step=name, level="debug", message="step.started")
        outcome = invoke_step(name, step, call_args, call_kwargs)

        if outcome.tag is OutcomeTag.SUCCEED:
            ctx.log(step=name, level="info", message="step.succeeded")
            ctx.log(step=None, level="info", message="call.finished", status="success")
            return apply_success_behavior(outcome.success, behavior)

        if outcome.tag is OutcomeTag.FAIL:
            ctx.log(
                step=name,
                level="error",
                message="step.failed",
                error=exception_to_payload(step=name, exc=outcome.error, pipeline=ctx.pipeline).to_dict(),
            )
            raise outcome.error

        ctx.log(step=name, level="debug", message="step.finished")

    ctx.log(step=None, level="info", message="call.finished", status="exhausted")
    return None
