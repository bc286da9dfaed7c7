# src/sub_pipeline/core/pipeline/__init__.py
"""
# Pipeline Core — sub-pipeline

Este pacote define os **contratos canônicos** e as **estruturas fundamentais**
que compõem um pipeline no sub-pipeline.

Um pipeline é uma **sequência nomeada e ordenada de Steps**, onde:
- cada Step é um invocável registrado sob um nome
- a ordem declarada é a ordem de execução
- um Step encerra o pipeline com sucesso levantando `Success`

## Componentes

- **types**
  - `SuccessBehavior`: política de entrega de um `Success`
  - `OutcomeTag` / `StepOutcome`: resultado rotulado de uma invocação

- **step**
  - `Step` (Protocol) e `is_step`: contrato mínimo de um Step

- **registry**
  - `StepRegistry`: mapeamento nome → invocável

- **context**
  - `CallContext`: estado compartilhado de uma chamada (notas e eventos)

- **pipeline**
  - `Pipeline`: configuração, validação, chamada e adapters de namespace

## Invariantes

- Nomes podem se repetir na ordem; cada ocorrência executa o Step
- Um nome pode estar na ordem antes de ter implementação (vínculo tardio)
- Apenas invocáveis são aceitos como implementação de Step
"""
