# src/esteira/core/traceability/event_log.py
"""
Event log estruturado de execuções.

Este módulo define o `TraceRecorder`, um par de hooks (before/after) que
registra eventos estruturados para cada Step executado por um Pipeline.

Logs não são tratados como strings livres, mas como eventos:

    {
        "run_id": str,
        "step": str,
        "level": "DEBUG" | "INFO",
        "message": str,
        "timestamp": ISO 8601 UTC,
        ...campos extras (phase, duration_ms)
    }

Decisões arquiteturais:
    - O recorder é um hook comum; o Engine não o conhece
    - UTC é o timezone canônico de todos os timestamps
    - Eventos abaixo do nível configurado são descartados
    - Um Step que falha não gera evento `after` (o hook não é alcançado)

Invariantes:
    - `events` é uma lista ordenada pela ordem real de emissão
    - Todo evento contém `run_id` e `step`

Limites explícitos:
    - Não persiste eventos
    - Não captura exceções
    - Não altera o dado compartilhado
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from esteira.core.pipeline.types import Hooks


LEVELS: Dict[str, int] = {"DEBUG": 10, "INFO": 20}


def step_label(meta: Any) -> str:
    """
    Deriva um rótulo legível para o Step a partir de seu `meta`.

    Ordem de resolução:
        - mapping com chave `name`
        - atributo `name` ou `id` (string) do objeto
        - nome do tipo do meta
    """
    if isinstance(meta, Mapping):
        name = meta.get("name")
        if name is not None:
            return str(name)
    else:
        for attr in ("name", "id"):
            value = getattr(meta, attr, None)
            if isinstance(value, str) and value:
                return value
    return type(meta).__name__


def _ms_between(start: datetime, end: datetime) -> int:
    return max(0, int((end - start).total_seconds() * 1000))


@dataclass
class TraceRecorder:
    """
    Recorder de eventos estruturados usado como hooks de um Pipeline.

    Args:
        run_id: Identificador da execução; gerado (uuid4) quando omitido.
        level: Nível mínimo registrado (`DEBUG` ou `INFO`).
    """

    run_id: Optional[str] = None
    level: str = "INFO"

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    _started: Dict[Tuple[int, int], datetime] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.level not in LEVELS:
            raise ValueError(f"level deve ser um de {sorted(LEVELS)}, recebido: {self.level!r}")
        if self.run_id is None:
            self.run_id = uuid.uuid4().hex

    def log(self, *, step: str, level: str, message: str, **extra: Any) -> None:
        if LEVELS.get(level, 0) < LEVELS[self.level]:
            return
        event = {
            "run_id": self.run_id,
            "step": step,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    # -----------------------------
    # Hooks
    # -----------------------------
    def before(self, data: Any, meta: Any) -> None:
        # chave (dado, meta): filhos concorrentes com o mesmo meta têm slots distintos;
        # sobrescrever descarta o início deixado por uma execução que falhou
        self._started[(id(data), id(meta))] = datetime.now(timezone.utc)
        self.log(step=step_label(meta), level="DEBUG", message="step started", phase="before")

    def after(self, data: Any, meta: Any) -> None:
        end = datetime.now(timezone.utc)
        start = self._started.pop((id(data), id(meta)), end)
        self.log(
            step=step_label(meta),
            level="INFO",
            message="step finished",
            phase="after",
            duration_ms=_ms_between(start, end),
        )

    def hooks(self) -> Hooks:
        return Hooks(before=self.before, after=self.after)
