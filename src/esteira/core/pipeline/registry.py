# src/esteira/core/pipeline/registry.py
"""
Registro ordenado de Steps do pipeline.

Este módulo define o `StepRegistry`, a sequência append-only de
`StepRecord` mantida por cada Pipeline.

Responsabilidades do módulo:
    - Preservar a ordem de registro dos Steps
    - Expor acesso somente leitura aos Steps registrados

Decisões arquiteturais:
    - Steps nunca são removidos ou reordenados
    - A definição original do Step não é validada aqui; o registry só
      aceita registros já normalizados
    - A leitura devolve uma cópia, protegendo a ordem interna

Invariantes:
    - A lista de Steps reflete exatamente a ordem de registro
    - Cada chamada a `add` acrescenta exatamente um registro

Limites explícitos:
    - Não normaliza Steps (ver `step.normalize_step`)
    - Não executa pipeline
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

from .types import StepRecord


@dataclass
class StepRegistry:
    """Sequência append-only de Steps normalizados."""

    _steps: List[StepRecord] = field(default_factory=list, init=False, repr=False)

    def add(self, record: StepRecord) -> None:
        if not isinstance(record, StepRecord):
            raise TypeError(f"StepRegistry aceita apenas StepRecord, recebido: {type(record).__name__}")
        self._steps.append(record)

    def list(self) -> List[StepRecord]:
        return list(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[StepRecord]:
        return iter(self.list())
