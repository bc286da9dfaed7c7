# tests/core/namespace/test_namespace_installer.py
"""
Testes do adapter de namespaces.

Este módulo valida:
- `as_callable` e `install_as` (rotina única equivalente a `call`)
- `load_from_namespace` (vínculo tardio de implementações)
- `save_to_namespace` (Steps nomeados + rotina `call` com resolução tardia)
- colisões de nomes e `allow_overwrite`
- namespaces de objeto (classes, módulos) e de mapeamento

Decisões arquiteturais:
    - A rotina `call` resolve os Steps no namespace a cada chamada
    - Colisões são verificadas antes de qualquer escrita
    - Apenas entradas próprias do namespace contam como colisão
"""
import types

import pytest

try:
    from sub_pipeline.core.config.errors import ConfigurationError
    from sub_pipeline.core.exceptions import (
        CollisionError,
        NamespaceLookupError,
        StepMissing,
        Success,
    )
    from sub_pipeline.core.namespace.installer import install_routine
    from sub_pipeline.core.namespace.namespace import (
        MappingNamespace,
        ObjectNamespace,
        as_namespace,
    )
    from sub_pipeline.core.pipeline.pipeline import Pipeline
except Exception as e:  # noqa: BLE001
    Pipeline = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o adapter de namespaces esteja disponível para os testes.

    Usado para garantir:
        - Alinhamento entre testes e contratos do installer
        - Feedback claro durante desenvolvimento incremental
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing namespace adapter. Implement:\n"
            "- src/sub_pipeline/core/namespace/namespace.py\n"
            "- src/sub_pipeline/core/namespace/installer.py\n"
            f"Import error: {_IMPORT_ERR}"
        )


def _sum_pipeline():
    def add(a, b, ctx):
        ctx["sum"] = a + b

    def done(a, b, ctx):
        raise Success(ctx["sum"])

    return Pipeline(order=["add", "done"], steps={"add": add, "done": done}, name="summer")


# -----------------------------
# as_callable / install_as
# -----------------------------

def test_as_callable_is_equivalent_to_call():
    _require_imports()
    pipeline = _sum_pipeline()
    fn = pipeline.as_callable()

    assert fn(2, 3) == 5 == pipeline.call(2, 3)
    assert fn.pipeline is pipeline


def test_as_callable_tracks_later_configuration_changes():
    _require_imports()
    pipeline = _sum_pipeline()
    fn = pipeline.as_callable()

    pipeline.success_behavior = "return_outcome"

    outcome = fn(1, 1)
    assert isinstance(outcome, Success) and outcome.value == 2


def test_install_as_into_module():
    """
    Verifica a instalação do pipeline como função de um módulo.

    Invariantes:
        - A rotina instalada é acessível pelo nome pedido
        - Chamá-la equivale a `pipeline.call`
    """
    _require_imports()
    module = types.ModuleType("origami")
    _sum_pipeline().install_as("transmogrify", module)

    assert module.transmogrify(10, 20) == 30
    assert module.transmogrify.__name__ == "transmogrify"


def test_install_as_into_class_receives_instance_as_first_argument():
    _require_imports()

    class Origami:
        pass

    def record(*args):
        raise Success(args)

    Pipeline(order=["record"], steps={"record": record}).install_as("fold", Origami)

    instance = Origami()
    received = instance.fold(1)

    assert received[0] is instance
    assert received[1] == 1


def test_install_as_collision_requires_overwrite():
    _require_imports()
    target = {"transmogrify": len}

    with pytest.raises(CollisionError) as excinfo:
        _sum_pipeline().install_as("transmogrify", target)
    assert excinfo.value.name == "transmogrify"
    assert target["transmogrify"] is len

    _sum_pipeline().install_as("transmogrify", target, allow_overwrite=True)
    assert target["transmogrify"](1, 2) == 3


def test_install_as_requires_name():
    _require_imports()
    with pytest.raises(ConfigurationError):
        _sum_pipeline().install_as("", {})


def test_install_new_builds_and_installs():
    _require_imports()
    module = types.ModuleType("origami")

    def double(x, ctx):
        raise Success(x * 2)

    pipeline = Pipeline.install_new(
        {"order": ["double"], "pipe": {"double": double}, "into": module, "as": "twice"}
    )

    assert isinstance(pipeline, Pipeline)
    assert module.twice(21) == 42


def test_install_new_reinstall_flag():
    _require_imports()
    target = {"twice": len}
    record = {"order": [], "into": target, "as": "twice"}

    with pytest.raises(CollisionError):
        Pipeline.install_new(dict(record))

    Pipeline.install_new(dict(record, reinstall=True))
    assert target["twice"]() is None


def test_install_new_requires_target_and_name():
    _require_imports()
    with pytest.raises(ConfigurationError):
        Pipeline.install_new({"order": [], "as": "x"})
    with pytest.raises(ConfigurationError):
        Pipeline.install_new({"order": [], "into": {}})


# -----------------------------
# load_from_namespace
# -----------------------------

def test_load_from_namespace_binds_module_functions(pipe_pkg):
    _require_imports()
    pipeline = Pipeline(order=["begin", "check", "init", "run", "end"])

    pipeline.load_from_namespace(pipe_pkg)

    assert pipeline.step("begin") is pipe_pkg.begin
    assert pipeline.validate() is True
    assert pipeline.call() == 5


def test_load_from_namespace_missing_name(pipe_pkg):
    _require_imports()
    pipeline = Pipeline(order=["begin", "teardown"])

    with pytest.raises(LookupError) as excinfo:
        pipeline.load_from_namespace(pipe_pkg)

    assert isinstance(excinfo.value, NamespaceLookupError)
    assert excinfo.value.step == "teardown"


def test_load_from_namespace_ignores_non_callable_attributes(pipe_pkg):
    _require_imports()
    with pytest.raises(NamespaceLookupError):
        Pipeline(order=["value"]).load_from_namespace(pipe_pkg)


def test_load_from_mapping_namespace():
    _require_imports()
    pipeline = Pipeline(order=["a"])
    pipeline.load_from_namespace({"a": len})
    assert pipeline.step("a") is len


# -----------------------------
# save_to_namespace
# -----------------------------

def test_save_to_namespace_installs_steps_and_call():
    _require_imports()
    module = types.ModuleType("target")
    pipeline = _sum_pipeline()

    pipeline.save_to_namespace(module)

    assert module.add is pipeline.step("add")
    assert module.done is pipeline.step("done")
    assert module.call(4, 5) == 9


def test_save_to_namespace_late_binding():
    """
    Verifica que Steps redefinidos no namespace após a instalação
    passam a valer na chamada seguinte da rotina `call`.
    """
    _require_imports()
    module = types.ModuleType("target")
    _sum_pipeline().save_to_namespace(module)
    assert module.call(1, 2) == 3

    def done(a, b, ctx):
        raise Success(("redefined", ctx["sum"]))

    module.done = done

    assert module.call(1, 2) == ("redefined", 3)


def test_save_to_namespace_call_reads_current_configuration():
    _require_imports()
    namespace = {}
    pipeline = _sum_pipeline()
    pipeline.save_to_namespace(namespace)

    pipeline.success_behavior = "propagate"

    with pytest.raises(Success):
        namespace["call"](1, 1)


def test_save_to_namespace_call_reports_removed_step():
    _require_imports()
    namespace = {}
    _sum_pipeline().save_to_namespace(namespace)

    del namespace["done"]

    with pytest.raises(StepMissing) as excinfo:
        namespace["call"](1, 1)
    assert excinfo.value.step == "done"


def test_save_to_namespace_collision_writes_nothing():
    _require_imports()
    namespace = {"done": "occupied"}

    with pytest.raises(CollisionError) as excinfo:
        _sum_pipeline().save_to_namespace(namespace)

    assert excinfo.value.name == "done"
    assert namespace == {"done": "occupied"}


def test_save_to_namespace_overwrite():
    _require_imports()
    namespace = {"call": len, "done": "occupied"}

    _sum_pipeline().save_to_namespace(namespace, allow_overwrite=True)

    assert namespace["call"](2, 2) == 4


def test_save_to_namespace_requires_complete_pipeline():
    _require_imports()
    namespace = {}
    with pytest.raises(StepMissing):
        Pipeline(order=["ghost"]).save_to_namespace(namespace)
    assert namespace == {}


def test_save_to_namespace_rejects_reserved_step_name():
    _require_imports()
    with pytest.raises(ConfigurationError):
        Pipeline(order=["call"], steps={"call": len}).save_to_namespace({})


# -----------------------------
# Namespace adapters
# -----------------------------

def test_as_namespace_selects_adapter():
    _require_imports()

    class Target:
        pass

    assert isinstance(as_namespace({}), MappingNamespace)
    assert isinstance(as_namespace(Target), ObjectNamespace)
    assert isinstance(as_namespace(types.ModuleType("m")), ObjectNamespace)

    existing = MappingNamespace({})
    assert as_namespace(existing) is existing


def test_object_namespace_collision_ignores_inherited_attributes():
    _require_imports()

    class Base:
        def call(self):
            return "base"

    class Child(Base):
        pass

    install_routine("call", lambda self: "child", Child)
    assert Child().call() == "child"

    with pytest.raises(CollisionError):
        install_routine("call", lambda self: "again", Child)
