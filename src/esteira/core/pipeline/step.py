# src/esteira/core/pipeline/step.py
"""
Contrato de Step e normalização no registro.

Um Step pode ser declarado de duas formas:
    - Callable: invocado mais tarde como `operation(data, meta)`
    - Objeto executável: expõe `run(data, step)` (duck typing)

A normalização acontece uma única vez, no registro, produzindo um
`StepRecord` uniforme. A partir daí o Engine não precisa mais saber
qual era a forma original do Step.

Decisões arquiteturais:
    - Conformidade com `RunnableStep` é verificada via `@runtime_checkable`
    - Classes (tipos) nunca são tratadas como objetos executáveis
    - Valores não reconhecidos caem na variante callable; uma falha por
      valor não invocável só ocorre durante a execução

Limites explícitos:
    - Não valida assinatura de callables
    - Não executa Steps
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

from esteira.core.engine.continuation import resolve

from .types import StepRecord


@runtime_checkable
class RunnableStep(Protocol):
    """
    Contrato de um Step baseado em objeto.

    O objeto recebe o dado compartilhado e o `meta` do Step. Quando o
    registro não fornece meta explícita, o próprio objeto é usado como
    meta, permitindo que o Step inspecione sua configuração.
    """

    def run(self, data: Any, step: Any) -> Any:
        ...


def is_runnable(definition: Any) -> bool:
    if isinstance(definition, type):
        return False
    return isinstance(definition, RunnableStep) and callable(definition.run)


def normalize_step(definition: Any, meta: Optional[Any] = None) -> StepRecord:
    """
    Converte uma definição de Step em um `StepRecord` uniforme.

    Resolução de meta:
        - meta explícita (qualquer valor diferente de `None`) prevalece
        - objeto executável → o próprio objeto
        - callable → um dicionário vazio novo

    Args:
        definition: Callable ou objeto com `run(data, step)`.
        meta: Meta opcional do Step.

    Returns:
        StepRecord: Registro normalizado pronto para o Engine.
    """
    if is_runnable(definition):

        async def operation(data: Any, step: Any) -> Any:
            return await resolve(definition.run(data, step))

        return StepRecord(operation=operation, meta=definition if meta is None else meta)

    return StepRecord(operation=definition, meta={} if meta is None else meta)
