# src/esteira/core/engine/engine.py
"""
Engine de execução da Esteira.

Este módulo define o `Pipeline`, ponto de entrada público para registrar
Steps e executá-los em sequência sobre um dado compartilhado.

Fluxo:
    1. `register` / `each` normalizam e acrescentam Steps ao registry
    2. `execute` pede ao planner a cadeia (before, step, after) por Step
    3. As continuações são aguardadas estritamente em sequência

Contrato de aliasing (dado compartilhado):
    - Todos os Steps e hooks recebem **o mesmo** objeto de dado
    - Steps se comunicam mutando esse objeto, nunca substituindo-o
    - `execute` resolve com o objeto recebido (`is`), independentemente
      do que qualquer Step ou hook retorne

Política de falhas (fail-fast):
    - A primeira exceção interrompe a execução
    - A exceção propaga sem encapsulamento (mesmo objeto, mesmo traceback)
    - Steps já concluídos não são desfeitos; Steps seguintes não rodam

Limites explícitos:
    - Sem retry, sem timeout, sem cancelamento próprio; um
      `Task.cancel()` externo apenas propaga `CancelledError`
    - Não persiste estado
    - Não define o comportamento dos hooks
"""

from __future__ import annotations

from typing import Any, List, Optional

from esteira.core.pipeline.fanout import ItemOperation, build_fanout_step
from esteira.core.pipeline.registry import StepRegistry
from esteira.core.pipeline.slots import append_slot, assign_slot
from esteira.core.pipeline.step import normalize_step
from esteira.core.pipeline.types import Hooks, StepRecord

from .planner import plan_continuations


class Pipeline:
    """
    Pipeline assíncrono de Steps sobre um dado compartilhado.

    Args:
        hooks: Hooks padrão aplicados a toda execução deste Pipeline.
            Uma execução pode substituí-los via `execute(..., hooks=...)`.

    Exemplo:
        >>> async def a(data, meta):
        ...     data["y"] = 2
        >>> pipeline = Pipeline().register(a)
        >>> # await pipeline.execute({"x": 1}) -> {"x": 1, "y": 2}
    """

    def __init__(self, *, hooks: Optional[Hooks] = None):
        self.hooks: Hooks = hooks or Hooks()
        self._registry: StepRegistry = StepRegistry()

    @property
    def steps(self) -> List[StepRecord]:
        return self._registry.list()

    def __len__(self) -> int:
        return len(self._registry)

    # ------------------------------------------------------------------
    # Registro
    # ------------------------------------------------------------------
    def register(self, definition: Any, meta: Optional[Any] = None) -> "Pipeline":
        """
        Acrescenta um Step ao pipeline.

        `definition` pode ser um callable `(data, meta)` ou um objeto com
        `run(data, step)`. Nenhuma validação é feita aqui; um valor não
        invocável só falha durante `execute`.

        Returns:
            Pipeline: a própria instância, para encadeamento.
        """
        self._registry.add(normalize_step(definition, meta))
        return self

    step = register

    def each(self, item_operation: ItemOperation, items: Any, meta: Optional[Any] = None) -> "Pipeline":
        """
        Acrescenta um Step de fan-out/fan-in sobre `items`.

        Cada item é executado como `item_operation(data, item, key)` sem
        ordem entre itens; o pipeline só avança depois que todos terminam.
        Uma falha em qualquer item falha o Step com a mesma exceção.
        """
        self._registry.add(build_fanout_step(item_operation, items, meta))
        return self

    # ------------------------------------------------------------------
    # Execução
    # ------------------------------------------------------------------
    async def execute(self, data: Any = None, *, hooks: Optional[Hooks] = None) -> Any:
        """
        Executa todos os Steps registrados, em ordem, sobre `data`.

        Args:
            data: Dado compartilhado; `None` vira um dicionário vazio novo.
            hooks: Hooks desta execução; quando omitidos, usa os do Pipeline.

        Returns:
            O mesmo objeto de dado recebido (ou criado).
        """
        if data is None:
            data = {}

        effective = hooks if hooks is not None else self.hooks
        for continuation in plan_continuations(self._registry.list(), effective):
            data = await continuation(data)

        return data

    exec = execute

    # Nomes históricos dos alocadores de slots filhos.
    iterate = staticmethod(append_slot)
    itemize = staticmethod(assign_slot)
