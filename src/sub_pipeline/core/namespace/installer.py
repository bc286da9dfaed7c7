# src/sub_pipeline/core/namespace/installer.py
"""
Instalação de rotinas em namespaces.

Este módulo concentra as operações de escrita e leitura em namespaces
usadas pelo pipeline:

- `install_routine`   → instala um invocável sob um nome
- `load_steps`        → lê de um namespace as implementações da ordem
- `namespace_caller`  → cria a rotina `call` que resolve Steps no
  namespace no momento da chamada

Decisões arquiteturais:
    - Colisões são erro, a menos que `allow_overwrite` seja pedido
    - Uma instalação com múltiplos nomes verifica todas as colisões antes
      de escrever qualquer nome
    - A rotina `call` nunca captura implementações na instalação
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List

from ..config.errors import ConfigurationError
from ..engine.engine import run_steps
from ..exceptions import CollisionError, NamespaceLookupError
from .namespace import Namespace, as_namespace, namespace_label


CALL_ROUTINE = "call"


def install_routine(name: str, routine: Callable, target: Any, allow_overwrite: bool = False) -> Callable:
    """
    Instala `routine` sob `name` em `target`.

    Raises:
        ConfigurationError: Se `name` for vazio.
        CollisionError: Se `name` já existir e `allow_overwrite` for falso.
    """
    if not isinstance(name, str) or not name.strip():
        raise ConfigurationError("A instalação requer um nome de destino não vazio")
    as_namespace(target).install(name, routine, allow_overwrite=allow_overwrite)
    return routine


def install_many(routines: Dict[str, Callable], target: Any, allow_overwrite: bool = False) -> None:
    """Instala várias rotinas; nenhuma é escrita se alguma colidir."""
    namespace = as_namespace(target)
    if not allow_overwrite:
        for name in routines:
            if namespace.contains(name):
                raise CollisionError(name=name, namespace=namespace_label(namespace))
    for name, routine in routines.items():
        namespace.install(name, routine, allow_overwrite=True)


def load_steps(order: Iterable[str], target: Any) -> Dict[str, Callable]:
    """
    Resolve em `target` uma implementação para cada nome da ordem.

    Raises:
        NamespaceLookupError: Para o primeiro nome ausente no namespace.
    """
    namespace = as_namespace(target)
    found: Dict[str, Callable] = {}
    for name in order:
        step = namespace.resolve(name)
        if step is None:
            raise NamespaceLookupError(step=name, namespace=namespace_label(namespace))
        found[name] = step
    return found


def namespace_caller(
    namespace: Namespace,
    order: Callable[[], List[str]],
    success_behavior: Callable[[], Any],
    *,
    pipeline: str = "pipeline",
) -> Callable:
    """
    Cria a rotina orquestradora instalada como `call`.

    `order` e `success_behavior` são lidos a cada chamada; cada Step é
    resolvido no namespace apenas quando alcançado, de modo que Steps
    redefinidos após a instalação passam a valer na chamada seguinte.
    """

    def call(*args: Any, **kwargs: Any) -> Any:
        return run_steps(order(), success_behavior(), namespace.resolve, args, kwargs, pipeline=pipeline)

    call.__name__ = CALL_ROUTINE
    call.__qualname__ = f"{namespace_label(namespace)}.{CALL_ROUTINE}"
    return call
