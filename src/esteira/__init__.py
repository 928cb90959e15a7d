# src/esteira/__init__.py
"""
Esteira — motor assíncrono mínimo de pipelines.

Um chamador registra uma lista ordenada de Steps (callables ou objetos
com `run`) e os executa em sequência sobre um único dado mutável
compartilhado. Um Step pode abrir fan-out sobre uma coleção, executando
um item por vez de forma concorrente, e só avança quando todos terminam.

Arquitetura em alto nível:
    - core.pipeline      → tipos, normalização, registry, fan-out e slots
    - core.engine        → continuações, planner e o `Pipeline`
    - core.config        → carregamento/merge de configuração e hooks derivados
    - core.traceability  → event log estruturado usado como hooks

Limites explícitos:
    - Sem retry, cancelamento, timeout ou persistência
    - Não define o que hooks fazem; apenas os invoca ao redor de cada Step
"""
from .core.engine.continuation import resolve, wrap
from .core.engine.engine import Pipeline
from .core.pipeline.slots import append_slot, assign_slot
from .core.pipeline.step import RunnableStep
from .core.pipeline.types import Hooks, StepRecord
from .core.traceability.event_log import TraceRecorder

__all__ = [
    "Pipeline",
    "Hooks",
    "StepRecord",
    "RunnableStep",
    "TraceRecorder",
    "append_slot",
    "assign_slot",
    "resolve",
    "wrap",
]
