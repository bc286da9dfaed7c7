# src/sub_pipeline/core/pipeline/pipeline.py
"""
Pipeline — composição nomeada e ordenada de Steps.

Este módulo define o `Pipeline`, o objeto de configuração que guarda a
ordem de execução, o registry de Steps e o comportamento de sucesso, e
que expõe:

    - acessores de ordem, Step e comportamento de sucesso
    - validação sem execução (`validate`)
    - chamada direta (`call`) e conversão em função (`as_callable`)
    - carga e instalação em namespaces (`load_from_namespace`,
      `save_to_namespace`, `install_as`, `install_new`)

Decisões arquiteturais:
    - O pipeline não é invocável diretamente; use `call` ou `as_callable`
    - Cada chamada usa um instantâneo da ordem tomado no início da chamada
    - A resolução de cada Step ocorre quando ele é alcançado, então
      `call` não é implementado em termos de `validate`

Limites explícitos:
    - Não oferece isolamento entre chamadas concorrentes com efeitos colaterais
    - Não serializa implementações de Steps
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from ..config.errors import ConfigurationError
from ..config.hashing import compute_config_hash
from ..config.loader import validate_config_record
from ..engine.engine import run_steps
from ..engine.planner import plan_steps
from ..namespace.installer import (
    CALL_ROUTINE,
    install_many,
    install_routine,
    load_steps,
    namespace_caller,
)
from ..namespace.namespace import as_namespace
from .registry import StepRegistry
from .types import DEFAULT_SUCCESS_BEHAVIOR, SuccessBehavior


DEFAULT_PIPELINE_NAME = "pipeline"

INSTALL_KEYS = ("into", "as", "reinstall")


def _names(names: Iterable[str]) -> List[str]:
    if isinstance(names, (str, bytes)):
        raise ConfigurationError("'order' deve ser uma sequência de nomes de Steps")
    return list(names)


class Pipeline:
    """
    Composição nomeada e ordenada de Steps.

    Exemplo::

        pipeline = Pipeline(
            order=["init", "validate", "run"],
            steps={"init": init, "validate": validate, "run": run},
        )
        pipeline.call(10, 20)

    Atributos:
        - order: nomes dos Steps na ordem de execução (duplicatas permitidas)
        - success_behavior: `SuccessBehavior` aplicado a um `Success`
        - name: rótulo usado no log de eventos
    """

    def __init__(
        self,
        order: Optional[Iterable[str]] = None,
        steps: Optional[Mapping[str, Callable]] = None,
        on_success: Any = DEFAULT_SUCCESS_BEHAVIOR,
        name: Optional[str] = None,
    ) -> None:
        self.name: str = name or DEFAULT_PIPELINE_NAME
        self._order: List[str] = []
        self._steps = StepRegistry()
        self._success_behavior = DEFAULT_SUCCESS_BEHAVIOR

        self.set_order(order or [])
        for step_name, step in (steps or {}).items():
            self.set_step(step_name, step)
        self.success_behavior = on_success if on_success is not None else DEFAULT_SUCCESS_BEHAVIOR

    @classmethod
    def from_config(cls, record: Mapping[str, Any]) -> "Pipeline":
        """
        Constrói um pipeline a partir de um registro de configuração.

        Chaves reconhecidas: `order`, `pipe` (ou `steps`), `on_success`, `name`.

        Raises:
            ConfigurationError: Registro inválido ou `on_success` desconhecido.
            InvalidStepError: Implementação de Step não invocável.
        """
        normalized = validate_config_record(record)
        return cls(
            order=normalized["order"],
            steps=normalized["steps"],
            on_success=normalized["on_success"],
            name=normalized["name"],
        )

    # -----------------------------
    # Ordem
    # -----------------------------
    @property
    def order(self) -> List[str]:
        return list(self._order)

    @order.setter
    def order(self, names: Iterable[str]) -> None:
        self.set_order(names)

    def set_order(self, names: Iterable[str]) -> List[str]:
        """Substitui a ordem inteira e retorna a nova ordem."""
        self._order = _names(names)
        return list(self._order)

    # -----------------------------
    # Steps
    # -----------------------------
    def step(self, name: str) -> Optional[Callable]:
        return self._steps.get(name)

    def set_step(self, name: str, step: Callable) -> Callable:
        """
        Registra a implementação de um Step.

        Raises:
            ConfigurationError: Se `name` não for uma string não vazia.
            InvalidStepError: Se `step` não for invocável.
        """
        return self._steps.set(name, step)

    @property
    def steps(self) -> Dict[str, Callable]:
        return {name: self._steps.get(name) for name in self._steps}

    # -----------------------------
    # Comportamento de sucesso
    # -----------------------------
    @property
    def success_behavior(self) -> SuccessBehavior:
        return self._success_behavior

    @success_behavior.setter
    def success_behavior(self, mode: Any) -> None:
        self._success_behavior = SuccessBehavior.coerce(mode)

    # -----------------------------
    # Validação e execução
    # -----------------------------
    def validate(self) -> bool:
        """
        Verifica se todo nome da ordem resolve para um Step invocável.

        Nenhum Step é executado.

        Raises:
            StepMissing: Para o primeiro nome sem implementação.
        """
        plan_steps(self._order, self._steps.get)
        return True

    def call(self, *args: Any, **kwargs: Any) -> Any:
        """
        Executa o pipeline com os argumentos fornecidos.

        Cada Step recebe `*args`, o `CallContext` da chamada e `**kwargs`.
        Steps são resolvidos um a um, então Steps anteriores a um Step
        ausente já terão sido executados quando `StepMissing` for levantado.
        """
        return run_steps(
            list(self._order),
            self._success_behavior,
            self._steps.get,
            args,
            kwargs,
            pipeline=self.name,
        )

    def as_callable(self) -> Callable:
        """Retorna uma função equivalente a `self.call`."""

        def pipeline_call(*args: Any, **kwargs: Any) -> Any:
            return self.call(*args, **kwargs)

        pipeline_call.__name__ = self.name
        pipeline_call.__qualname__ = self.name
        pipeline_call.pipeline = self  # type: ignore[attr-defined]
        return pipeline_call

    # -----------------------------
    # Namespaces
    # -----------------------------
    def load_from_namespace(self, namespace: Any) -> None:
        """
        Carrega do namespace uma implementação para cada nome da ordem.

        Raises:
            NamespaceLookupError: Se algum nome não existir no namespace.
        """
        for step_name, step in load_steps(self._order, namespace).items():
            self.set_step(step_name, step)

    def save_to_namespace(self, namespace: Any, allow_overwrite: bool = False) -> Callable:
        """
        Instala cada Step sob seu nome e uma rotina `call` no namespace.

        A rotina `call` resolve os Steps no namespace a cada chamada, de
        modo que redefinições feitas após a instalação passam a valer.

        Raises:
            ConfigurationError: Se a ordem usar o nome reservado `call`.
            StepMissing: Se algum Step da ordem não tiver implementação.
            CollisionError: Se algum nome já existir e `allow_overwrite` for falso.
        """
        if CALL_ROUTINE in self._order:
            raise ConfigurationError(f"O nome {CALL_ROUTINE!r} é reservado para a rotina orquestradora")
        target = as_namespace(namespace)
        routines = dict(plan_steps(self._order, self._steps.get))
        routines[CALL_ROUTINE] = namespace_caller(
            target,
            lambda: self.order,
            lambda: self.success_behavior,
            pipeline=self.name,
        )
        install_many(routines, target, allow_overwrite=allow_overwrite)
        return routines[CALL_ROUTINE]

    def install_as(self, name: str, target: Any, allow_overwrite: bool = False) -> Callable:
        """
        Instala `as_callable()` sob `name` em `target`.

        Raises:
            ConfigurationError: Se `name` for vazio.
            CollisionError: Se `name` já existir e `allow_overwrite` for falso.
        """
        if not name:
            raise ConfigurationError("install_as requer um nome de destino")
        routine = self.as_callable()
        routine.__name__ = name
        routine.__qualname__ = name
        return install_routine(name, routine, target, allow_overwrite=allow_overwrite)

    @classmethod
    def install_new(cls, record: Mapping[str, Any]) -> "Pipeline":
        """
        Cria um pipeline e o instala em um passo.

        As chaves `into`, `as` e `reinstall` são repassadas a `install_as`;
        as demais são repassadas a `from_config`.

        Raises:
            ConfigurationError: Se `into` ou `as` estiverem ausentes.
        """
        options = dict(record)
        install = {key: options.pop(key) for key in INSTALL_KEYS if key in options}
        if "into" not in install or not install.get("as"):
            raise ConfigurationError("install_new requer as chaves 'into' e 'as'")

        pipeline = cls.from_config(options)
        pipeline.install_as(
            install["as"],
            install["into"],
            allow_overwrite=bool(install.get("reinstall", False)),
        )
        return pipeline

    # -----------------------------
    # Rastreabilidade
    # -----------------------------
    def describe(self) -> Dict[str, Any]:
        """Descrição serializável (sem implementações) do pipeline."""
        return {
            "name": self.name,
            "order": list(self._order),
            "on_success": self._success_behavior.value,
            "steps": sorted(self._steps.names()),
        }

    def fingerprint(self) -> str:
        return compute_config_hash(self.describe())

    def __repr__(self) -> str:
        return (
            f"Pipeline(name={self.name!r}, order={self._order!r}, "
            f"on_success={self._success_behavior.value!r})"
        )
