# src/esteira/core/pipeline/types.py
"""
Tipos canônicos do pipeline da Esteira.

Este módulo define as estruturas fundamentais que padronizam a comunicação
entre registro, planner e Engine.

Os tipos aqui definidos representam:
    - a assinatura uniforme de uma operação de Step
    - o registro imutável de um Step normalizado
    - os slots opcionais de hooks (before/after)

Componentes principais:
    - StepOperation → callable `(data, meta)` síncrono ou assíncrono
    - HookFn        → callable `(data, meta)` invocado ao redor de cada Step
    - StepRecord    → par imutável (operation, meta)
    - Hooks         → par opcional (before, after)

Princípios fundamentais:
    - Nenhuma lógica de execução vive neste módulo
    - A forma original do Step (callable ou objeto com `run`) já foi
      resolvida quando um StepRecord existe

Limites explícitos:
    - Não executa Steps
    - Não valida formato de Steps ou listas
    - Não define o comportamento dos hooks
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Union


StepOperation = Callable[[Any, Any], Union[Awaitable[Any], Any]]
HookFn = Callable[[Any, Any], Union[Awaitable[Any], None]]
Continuation = Callable[[Any], Awaitable[Any]]


@dataclass(frozen=True)
class StepRecord:
    """
    Registro imutável de um Step normalizado.

    Campos:
        - operation: callable invocado como `operation(data, meta)`; o valor
          retornado é descartado pelo Engine
        - meta: valor opaco entregue à operação e aos hooks do Step

    Invariantes:
        - `meta` é `{}` para callables registrados sem meta explícita
        - `meta` é o próprio objeto para Steps com `run` sem meta explícita
        - O Engine nunca ramifica sobre a forma original do Step
    """

    operation: StepOperation
    meta: Any


@dataclass(frozen=True)
class Hooks:
    """
    Slots opcionais de hooks invocados ao redor de cada Step.

    Hooks são fornecidos explicitamente na construção do Pipeline ou em
    cada chamada de `execute`; não existe estado global compartilhado
    entre instâncias.

    Um slot ausente (`None`) é um no-op e não gera invocação alguma.
    """

    before: Optional[HookFn] = None
    after: Optional[HookFn] = None
