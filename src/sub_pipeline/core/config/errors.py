# src/sub_pipeline/core/config/errors.py
"""
Exceções canônicas da camada de configuração do sub-pipeline.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento de definições de pipeline, a validação do registro de
configuração e a escolha do comportamento de sucesso.

As exceções aqui definidas representam **violações de configuração
explícitas**, e não erros de execução de Steps.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros de configuração são superfícies imediatas ao chamador
    - Nenhum erro de configuração é recuperado internamente

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de execução de Step
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do sub-pipeline.

    Todas as exceções levantadas durante carregamento de arquivos,
    validação do registro de configuração e atribuição do comportamento
    de sucesso devem herdar desta classe.
    """


class ConfigurationError(ConfigError):
    """
    Exceção levantada quando um pipeline recebe configuração inválida.

    Casos cobertos:
        - `on_success` fora dos três modos reconhecidos
        - chaves desconhecidas no registro de configuração
        - `pipe` e `steps` declarados ao mesmo tempo
        - instalação sem nome de destino
        - nome de Step vazio ou não textual

    Decisões arquiteturais:
        - O erro surge no construtor ou no setter, nunca durante a chamada
        - Não existe fallback para um modo padrão quando o valor é inválido
    """


class DefinitionNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo base de definição do pipeline
    não é encontrado no caminho especificado.

    Limites explícitos:
        - Não tenta inferir ou criar definições automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de definição
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da definição
    não é um dicionário (`dict`).
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"order": ["begin", "end"]}
        - override: {"order": "begin"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """
