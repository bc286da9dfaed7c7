# src/sub_pipeline/core/namespace/namespace.py
"""
Capacidade de namespace.

Um namespace é uma coleção endereçável de invocáveis nomeados, da qual
o pipeline pode ler Steps (`resolve`) e na qual pode instalar rotinas
(`install`).

Implementações fornecidas:
    - ObjectNamespace  → classes, módulos e objetos (atributos)
    - MappingNamespace → mapeamentos mutáveis (ex.: `dict`, `globals()`)

Decisões arquiteturais:
    - O namespace é passado explicitamente ao adapter, nunca descoberto
    - Colisões consideram apenas entradas próprias do namespace (atributos
      herdados de bases não contam)
    - Valores não invocáveis não resolvem como Steps
"""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass
from types import ModuleType
from typing import Any, Callable, Optional, Protocol, runtime_checkable

from ..exceptions import CollisionError
from ..pipeline.step import is_step


@runtime_checkable
class Namespace(Protocol):
    """Contrato mínimo de um namespace de Steps."""

    def resolve(self, name: str) -> Optional[Callable]:
        ...

    def contains(self, name: str) -> bool:
        ...

    def install(self, name: str, value: Any, allow_overwrite: bool = False) -> None:
        ...


def _label(target: Any) -> str:
    for attr in ("__qualname__", "__name__"):
        value = getattr(target, attr, None)
        if isinstance(value, str):
            return value
    return f"<{type(target).__name__} object>"


@dataclass(frozen=True)
class ObjectNamespace:
    """Namespace sobre os atributos de uma classe, módulo ou objeto."""

    target: Any

    @property
    def label(self) -> str:
        return _label(self.target)

    def resolve(self, name: str) -> Optional[Callable]:
        value = getattr(self.target, name, None)
        return value if is_step(value) else None

    def contains(self, name: str) -> bool:
        try:
            return name in vars(self.target)
        except TypeError:
            # objetos sem __dict__ (ex.: __slots__)
            return hasattr(self.target, name)

    def install(self, name: str, value: Any, allow_overwrite: bool = False) -> None:
        if not allow_overwrite and self.contains(name):
            raise CollisionError(name=name, namespace=self.label)
        setattr(self.target, name, value)


@dataclass(frozen=True)
class MappingNamespace:
    """Namespace sobre um mapeamento mutável nome -> valor."""

    target: MutableMapping
    label: str = "<mapping>"

    def resolve(self, name: str) -> Optional[Callable]:
        value = self.target.get(name)
        return value if is_step(value) else None

    def contains(self, name: str) -> bool:
        return name in self.target

    def install(self, name: str, value: Any, allow_overwrite: bool = False) -> None:
        if not allow_overwrite and self.contains(name):
            raise CollisionError(name=name, namespace=self.label)
        self.target[name] = value


def as_namespace(target: Any) -> Namespace:
    """
    Adapta `target` à capacidade de namespace.

    Ordem de decisão:
        - instâncias que já satisfazem `Namespace` são devolvidas intactas
          (classes e módulos nunca, mesmo que definam `resolve`/`install`)
        - mapeamentos mutáveis → `MappingNamespace`
        - qualquer outro objeto → `ObjectNamespace`
    """
    if isinstance(target, Namespace) and not isinstance(target, (type, ModuleType)):
        return target
    if isinstance(target, MutableMapping):
        return MappingNamespace(target)
    return ObjectNamespace(target)


def namespace_label(namespace: Namespace) -> str:
    return getattr(namespace, "label", None) or _label(namespace)
