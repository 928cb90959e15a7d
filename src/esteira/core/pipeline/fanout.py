# src/esteira/core/pipeline/fanout.py
"""
Adapter de fan-out/fan-in.

Este módulo constrói um único `StepRecord` cuja operação dispara uma
invocação por item de uma coleção e aguarda todas antes de concluir.

Comportamento:
    - Mapping → itera `(chave, valor)` na ordem de inserção
    - Qualquer outro iterável → itera `(índice, valor)` via `enumerate`
    - Cada item é chamado como `item_operation(data, item, key)`
    - Resultados awaitable são lançados imediatamente como tasks
    - O join é `asyncio.gather` sobre todas as tasks lançadas

Decisões arquiteturais:
    - A coleção é enumerada no momento da execução, não do registro
    - Não existe ordem garantida entre itens
    - Fail-fast: a primeira falha observada é relançada sem alteração;
      os demais itens não são aguardados, cancelados ou suprimidos
    - A lista de resultados do join é descartada pelo Engine

Limites explícitos:
    - Não limita concorrência
    - Não isola escritas concorrentes no dado compartilhado
      (ver `slots.append_slot` / `slots.assign_slot`)
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Mapping
from typing import Any, Callable, Iterable, List, Optional, Tuple

from .types import StepRecord


ItemOperation = Callable[[Any, Any, Any], Any]


def _enumerate_items(items: Any) -> Iterable[Tuple[Any, Any]]:
    if isinstance(items, Mapping):
        return list(items.items())
    return enumerate(items)


def _launch(value: Any) -> "asyncio.Future[Any]":
    if inspect.isawaitable(value):
        return asyncio.ensure_future(value)
    # resultado síncrono: já concluído
    done = asyncio.get_running_loop().create_future()
    done.set_result(value)
    return done


def build_fanout_step(item_operation: ItemOperation, items: Any, meta: Optional[Any] = None) -> StepRecord:
    """
    Cria o Step de fan-out/fan-in sobre `items`.

    Args:
        item_operation: Callable `(data, item, key)` síncrono ou assíncrono.
        items: Sequência ou mapping percorrido na execução.
        meta: Meta opcional do Step (default: dicionário vazio novo).

    Returns:
        StepRecord: Registro cuja operação resolve com a lista de
        resultados por item, depois que todos terminam.
    """

    async def operation(data: Any, step: Any) -> List[Any]:
        children = [_launch(item_operation(data, item, key)) for key, item in _enumerate_items(items)]
        return await asyncio.gather(*children)

    return StepRecord(operation=operation, meta={} if meta is None else meta)
