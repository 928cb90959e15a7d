# src/esteira/core/engine/planner.py
"""
Planejador da cadeia de continuações.

Este módulo transforma os Steps registrados e os hooks efetivos de uma
execução em uma sequência linear de continuações, pronta para ser
aguardada em ordem pelo Engine.

Para cada Step, na ordem de registro, o planner emite a tripla:

    [before-hook, step.operation, after-hook]

cada elemento envolvido por `continuation.wrap` com o `meta` do próprio
Step.

Princípios fundamentais:
    - A ordem produzida é exatamente a ordem de registro
    - Hooks ausentes também geram continuações (no-ops), mantendo o
      formato 3×N da cadeia
    - Planejamento e execução são responsabilidades separadas

Limites explícitos:
    - Não executa continuações
    - Não valida Steps
"""

from __future__ import annotations

from typing import Iterable, List

from esteira.core.pipeline.types import Continuation, Hooks, StepRecord

from .continuation import wrap


def plan_continuations(steps: Iterable[StepRecord], hooks: Hooks) -> List[Continuation]:
    """
    Produz a cadeia sequencial de continuações de uma execução.

    Args:
        steps: Steps normalizados, em ordem de registro.
        hooks: Hooks efetivos da execução.

    Returns:
        List[Continuation]: 3 continuações por Step (before, step, after).
    """
    plan: List[Continuation] = []
    for step in steps:
        for operation in (hooks.before, step.operation, hooks.after):
            plan.append(wrap(operation, step.meta))
    return plan
