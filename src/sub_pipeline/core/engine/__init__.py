# src/sub_pipeline/core/engine/__init__.py
"""
Engine do sub-pipeline.

Este pacote contém a rotina de execução compartilhada por todas as
formas de invocar um pipeline (chamada direta, rotina instalada em
namespace e pipelines de classe).

Componentes principais:
    - planner → resolução da ordem de execução sem invocar Steps
    - engine  → laço de invocação e aplicação do comportamento de sucesso

Invariantes:
    - Steps executam estritamente na ordem declarada, um por vez
    - Nenhum Step é pulado, repetido ou paralelizado pelo engine
    - Execução parcial nunca é desfeita

Limites explícitos:
    - Não oferece retry, timeout ou cancelamento
    - Não conhece a representação do namespace de origem dos Steps
"""
