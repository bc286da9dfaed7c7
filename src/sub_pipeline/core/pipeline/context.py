# src/sub_pipeline/core/pipeline/context.py
"""
Contexto compartilhado de uma chamada de pipeline.

Este módulo define o `CallContext`, o registro mutável criado pelo
engine a cada chamada e anexado como último argumento posicional de
todos os Steps dessa chamada.

O CallContext atua como:
    - bloco de notas compartilhado entre Steps (`ctx["chave"] = valor`)
    - log estruturado de eventos da chamada

Princípios fundamentais:
    - Isolamento por chamada (cada chamada possui seu próprio contexto)
    - Todos os Steps de uma chamada recebem a mesma instância
    - Mutações feitas por um Step são visíveis aos Steps seguintes

Invariantes:
    - Eventos sempre incluem `call_id`, `pipeline` e `step`
    - A ordem de `events` reflete a ordem de registro

Limites explícitos:
    - Não executa Steps
    - Não decide políticas de execução
    - Não persiste dados
"""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional
from uuid import uuid4


@dataclass(eq=False)
class CallContext(MutableMapping):
    """
    Registro de estado compartilhado de uma única chamada de pipeline.

    Campos:
        - pipeline: rótulo do pipeline que originou a chamada
        - call_id: identificador único da chamada
        - created_at: timestamp UTC de criação
        - notes: anotações livres compartilhadas entre Steps
        - events: log estruturado da chamada

    O contexto se comporta como um dicionário sobre `notes`.
    """
    pipeline: str = "pipeline"
    call_id: str = field(default_factory=lambda: uuid4().hex)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    notes: Dict[str, Any] = field(default_factory=dict)
    events: List[Dict[str, Any]] = field(default_factory=list, repr=False)

    # -----------------------------
    # Notes
    # -----------------------------
    def __getitem__(self, key: str) -> Any:
        return self.notes[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.notes[key] = value

    def __delitem__(self, key: str) -> None:
        del self.notes[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.notes)

    def __len__(self) -> int:
        return len(self.notes)

    # identidade, não conteúdo das notas
    __eq__ = object.__eq__
    __hash__ = object.__hash__

    # -----------------------------
    # Logging
    # -----------------------------
    def log(self, *, step: Optional[str], level: str, message: str, **extra: Any) -> None:
        event = {
            "call_id": self.call_id,
            "pipeline": self.pipeline,
            "step": step,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def events_for(self, step: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["step"] == step]
