# tests/conftest.py
"""
Fixtures compartilhados para testes do sub-pipeline.

Este módulo define fixtures reutilizáveis que fornecem:
- definições de pipeline em YAML (base e override local)
- Steps contadores determinísticos
- um módulo de Steps reiniciado a cada teste (namespace externo)

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Steps de teste são funções comuns, sem herança
    - Módulos de Steps são carregados a partir do arquivo, sem depender
      de `tests` ser importável como pacote

Invariantes:
    - Nenhuma fixture executa um pipeline
    - Estado global de módulos de fixture é reiniciado antes de cada uso
"""

import importlib.util
from pathlib import Path

import pytest


FIXTURE_STEPS_DIR = Path(__file__).parent / "fixtures" / "steps"


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def pipeline_definition_yaml() -> str:
    """
    Definição base de pipeline, como em um `pipeline.yaml` versionado.

    Returns:
        str: Conteúdo YAML com ordem, comportamento de sucesso e nome.
    """
    return """\
name: transmogrify
on_success: return_value
order:
  - begin
  - check
  - init
  - run
  - end
"""


@pytest.fixture
def pipeline_local_yaml() -> str:
    """
    Override local: troca o comportamento de sucesso e encurta a ordem.

    Returns:
        str: Conteúdo YAML de override.
    """
    return """\
on_success: return_outcome
order:
  - begin
  - end
"""


# =====================================================
# Step fixtures
# =====================================================

@pytest.fixture
def counting_step():
    """
    Fábrica de Steps que registram o valor do contador compartilhado.

    Cada Step criado anexa `(nome, contador)` a `ctx["seen"]` e
    incrementa `ctx["counter"]`, permitindo verificar a ordem exata
    de execução e o compartilhamento do `CallContext`.
    """

    def make(name: str):
        def step(*args):
            ctx = args[-1]
            seen = ctx.setdefault("seen", [])
            counter = ctx.get("counter", 0)
            seen.append((name, counter))
            ctx["counter"] = counter + 1

        step.__name__ = name
        return step

    return make


@pytest.fixture
def pipe_pkg():
    """
    Módulo de Steps usado como namespace externo.

    O módulo é carregado do arquivo a cada uso, garantindo contador
    zerado e nenhuma rotina instalada por testes anteriores.
    """
    spec = importlib.util.spec_from_file_location("pipe_pkg", FIXTURE_STEPS_DIR / "pipe_pkg.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
