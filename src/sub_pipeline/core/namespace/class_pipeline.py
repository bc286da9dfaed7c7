# src/sub_pipeline/core/namespace/class_pipeline.py
"""
Pipelines declarados em nível de classe.

O decorator `pipeline_class` transforma os métodos de uma classe em
Steps: a classe recebe sua própria configuração (`pipeline_config`) e
um método `call` que resolve cada Step como `getattr(self, nome)` no
momento da chamada.

Exemplo::

    @pipeline_class(order=["begin", "run", "end"])
    class Job:
        def begin(self, ctx): ...
        def run(self, ctx): ...
        def end(self, ctx):
            raise Success(ctx["total"])

    Job().call()

Decisões arquiteturais:
    - A configuração pertence à classe decorada e é endereçável por ela
    - Decorar duas classes nunca compartilha estado de ordem
    - Cada subclasse recebe sua própria cópia da configuração do pai
      (mutá-la não afeta a base) e pode sobrescrever Steps
      (ou atribuir uma nova `ClassPipelineConfig`)
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Iterable, List, Type

from ..config.errors import ConfigurationError
from ..engine.engine import run_steps
from ..pipeline.types import DEFAULT_SUCCESS_BEHAVIOR, SuccessBehavior
from .installer import CALL_ROUTINE, install_routine


CONFIG_ATTRIBUTE = "pipeline_config"


def _names(order: Iterable[str]) -> List[str]:
    if isinstance(order, (str, bytes)):
        raise ConfigurationError("'order' deve ser uma sequência de nomes de Steps")
    return list(order)


@dataclass
class ClassPipelineConfig:
    """Ordem e comportamento de sucesso de um pipeline de classe."""

    order: List[str] = field(default_factory=list)
    success_behavior: SuccessBehavior = DEFAULT_SUCCESS_BEHAVIOR

    def __post_init__(self) -> None:
        self.order = _names(self.order)
        self.success_behavior = SuccessBehavior.coerce(self.success_behavior)

    def set_order(self, names: Iterable[str]) -> List[str]:
        self.order = _names(names)
        return list(self.order)

    def set_success_behavior(self, mode: Any) -> SuccessBehavior:
        self.success_behavior = SuccessBehavior.coerce(mode)
        return self.success_behavior


def _class_call(self: Any, *args: Any, **kwargs: Any) -> Any:
    config: ClassPipelineConfig = getattr(type(self), CONFIG_ATTRIBUTE)
    return run_steps(
        list(config.order),
        config.success_behavior,
        lambda name: getattr(self, name, None),
        args,
        kwargs,
        pipeline=type(self).__qualname__,
    )


def _copy_config_on_subclass(cls: Type) -> None:
    """Faz cada subclasse de `cls` nascer com uma cópia da configuração herdada."""
    original = cls.__dict__.get("__init_subclass__")

    def __init_subclass__(sub: Type, **kwargs: Any) -> None:
        if original is not None:
            original.__func__(sub, **kwargs)
        else:
            super(cls, sub).__init_subclass__(**kwargs)
        # configuração declarada no corpo da subclasse prevalece
        if CONFIG_ATTRIBUTE not in vars(sub):
            inherited: ClassPipelineConfig = getattr(sub, CONFIG_ATTRIBUTE)
            setattr(sub, CONFIG_ATTRIBUTE, replace(inherited, order=list(inherited.order)))

    cls.__init_subclass__ = classmethod(__init_subclass__)


def pipeline_class(
    order: Iterable[str],
    on_success: Any = DEFAULT_SUCCESS_BEHAVIOR,
    *,
    allow_overwrite: bool = False,
) -> Callable[[Type], Type]:
    """
    Decorator que instala um pipeline de classe.

    Args:
        order (Iterable[str]): Nomes dos métodos-Step, na ordem de execução.
        on_success: Comportamento de sucesso (padrão `return_value`).
        allow_overwrite (bool): Permite substituir um `call` já definido
            na própria classe.

    Raises:
        ConfigurationError: Se `on_success` for inválido.
        CollisionError: Se a classe já definir `call` e overwrite não for pedido.
    """
    names = _names(order)
    behavior = SuccessBehavior.coerce(on_success)

    def decorate(cls: Type) -> Type:
        install_routine(CALL_ROUTINE, _class_call, cls, allow_overwrite=allow_overwrite)
        setattr(cls, CONFIG_ATTRIBUTE, ClassPipelineConfig(order=list(names), success_behavior=behavior))
        _copy_config_on_subclass(cls)
        return cls

    return decorate
