# src/sub_pipeline/core/namespace/__init__.py
"""
Adapter de namespaces do sub-pipeline.

Este pacote converte pipelines em rotinas instaláveis e lê
implementações de Steps a partir de namespaces externos.

Componentes principais:
    - namespace      → capacidade `Namespace` e adaptadores para objetos
      (classes, módulos) e mapeamentos
    - installer      → instalação de rotinas, carga de Steps e criação
      da rotina `call` com resolução tardia
    - class_pipeline → decorator `pipeline_class` para pipelines de classe

Limites explícitos:
    - Não executa Steps diretamente (delegado ao engine)
    - Não serializa implementações
"""
