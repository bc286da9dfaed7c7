# src/sub_pipeline/__init__.py
"""
sub-pipeline — rotinas compostas de Steps sequenciais.

Este pacote raiz define o namespace público do sub-pipeline, um
framework para compor uma sequência nomeada e ordenada de invocáveis
("Steps") em uma única operação lógica, com sinal de sucesso antecipado
e instalação da operação composta como rotina reutilizável em um
namespace (classe, módulo, objeto ou mapeamento).

Uso típico::

    from sub_pipeline import Pipeline, Success

    def init(x, ctx):
        ctx["total"] = x

    def run(x, ctx):
        raise Success(ctx["total"] * 2)

    pipeline = Pipeline(order=["init", "run"], steps={"init": init, "run": run})
    pipeline.call(21)  # 42

Arquitetura em alto nível:
    - core.exceptions → `Success`, `StepMissing` e erros tipados
    - core.config     → registro de configuração e definições em arquivo
    - core.pipeline   → `Pipeline`, registry, contexto de chamada e tipos
    - core.engine     → laço de execução compartilhado
    - core.namespace  → instalação em namespaces e pipelines de classe

Limites explícitos:
    - Sem retry, timeout ou execução paralela de Steps
    - Sem validação de assinaturas de Steps
    - Sem persistência de implementações de Steps
"""

from .core.config.errors import ConfigError, ConfigurationError
from .core.config.loader import load_config
from .core.engine.engine import run_steps
from .core.engine.planner import plan_steps
from .core.exceptions import (
    CollisionError,
    InvalidStepError,
    NamespaceLookupError,
    StepMissing,
    Success,
)
from .core.namespace.class_pipeline import ClassPipelineConfig, pipeline_class
from .core.namespace.installer import install_routine
from .core.namespace.namespace import MappingNamespace, Namespace, ObjectNamespace, as_namespace
from .core.pipeline.context import CallContext
from .core.pipeline.pipeline import Pipeline
from .core.pipeline.types import OutcomeTag, StepOutcome, SuccessBehavior

__all__ = [
    "CallContext",
    "ClassPipelineConfig",
    "CollisionError",
    "ConfigError",
    "ConfigurationError",
    "InvalidStepError",
    "MappingNamespace",
    "Namespace",
    "NamespaceLookupError",
    "ObjectNamespace",
    "OutcomeTag",
    "Pipeline",
    "StepMissing",
    "StepOutcome",
    "Success",
    "SuccessBehavior",
    "as_namespace",
    "install_routine",
    "load_config",
    "pipeline_class",
    "plan_steps",
    "run_steps",
]
