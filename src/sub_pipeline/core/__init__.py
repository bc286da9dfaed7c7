# src/sub_pipeline/core/__init__.py
"""
Core do sub-pipeline.

Este pacote reúne a implementação canônica do framework: sinais de
resultado, configuração, pipeline, engine de execução e adapter de
namespaces.

Componentes principais:
    - exceptions → `Success`, `StepMissing` e erros tipados
    - errors     → payloads descritivos de falhas para o log de eventos
    - config     → carregamento, merge, validação e hashing de definições
    - pipeline   → tipos, contrato de Step, registry, contexto e `Pipeline`
    - engine     → planejamento da ordem e laço de invocação
    - namespace  → instalação em namespaces e pipelines de classe

Princípios fundamentais:
    - Execução síncrona, estritamente sequencial
    - Nenhuma exceção de Step é encapsulada ou suprimida
    - Execução parcial nunca é desfeita
"""
