# src/esteira/core/pipeline/slots.py
"""
Alocadores de slots filhos.

Utilitários usados por autores de Steps dentro de um fan-out: cada
pipeline filho recebe um registro vazio próprio, ainda ligado à
estrutura do pai, para escrever seus resultados sem disputar chaves com
os irmãos.

Limites explícitos:
    - Não têm relação com o estado do Pipeline
    - Não sincronizam acesso concorrente
"""

from __future__ import annotations

from typing import Any, Dict, MutableMapping, MutableSequence


def append_slot(parent: MutableSequence[Any]) -> Dict[str, Any]:
    """Acrescenta um dicionário vazio ao fim de `parent` e devolve o mesmo objeto."""
    slot: Dict[str, Any] = {}
    parent.append(slot)
    return slot


def assign_slot(parent: MutableMapping[Any, Any], key: Any) -> Dict[str, Any]:
    """Grava um dicionário vazio em `parent[key]` (sobrescrevendo) e o devolve."""
    slot: Dict[str, Any] = {}
    parent[key] = slot
    return slot
