# src/esteira/core/engine/continuation.py
"""
Continuação com preservação de dado (hook-wrapping).

Este módulo define o invólucro aplicado de forma idêntica a hooks e a
Steps registrados. Cada continuação recebe o dado compartilhado, invoca
a operação (quando existe) com o `meta` do Step e devolve **o mesmo**
objeto de dado, descartando o valor retornado pela operação.

Decisões arquiteturais:
    - Operações podem ser síncronas ou assíncronas; valores awaitable
      são aguardados, os demais são descartados diretamente
    - Operação ausente (falsy) é um no-op sem invocação
    - Exceções da operação propagam sem encapsulamento

Invariantes:
    - A continuação sempre devolve o objeto recebido (`is`)
    - O valor retornado pela operação nunca substitui o dado

Limites explícitos:
    - Não decide ordem de execução
    - Não registra eventos
"""

from __future__ import annotations

import inspect
from typing import Any, Optional

from esteira.core.pipeline.types import Continuation, StepOperation


async def resolve(value: Any) -> Any:
    """Aguarda `value` apenas quando ele é awaitable."""
    if inspect.isawaitable(value):
        return await value
    return value


def wrap(operation: Optional[StepOperation], meta: Any) -> Continuation:
    """
    Produz a continuação `data -> data` de uma operação opcional.

    Args:
        operation: Hook ou operação de Step; `None` produz um no-op.
        meta: Meta do Step entregue como segundo argumento.

    Returns:
        Continuation: Corrotina que resolve com o próprio dado recebido.
    """

    async def continuation(data: Any) -> Any:
        if operation:
            await resolve(operation(data, meta))
        return data

    return continuation
