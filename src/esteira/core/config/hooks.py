# src/esteira/core/config/hooks.py
"""
Hooks derivados da configuração.

Seção esperada:

    engine:
      trace:
        enabled: false   # bool
        level: INFO      # DEBUG | INFO
        run_id: null     # str opcional

Quando `enabled` é verdadeiro, os hooks devolvidos gravam eventos
estruturados em um `TraceRecorder`; caso contrário, os hooks são vazios
e nenhuma invocação extra acontece durante a execução.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from esteira.core.pipeline.types import Hooks
from esteira.core.traceability.event_log import LEVELS, TraceRecorder

from .errors import InvalidTraceConfigError


@dataclass(frozen=True)
class TraceSettings:
    enabled: bool = False
    level: str = "INFO"
    run_id: Optional[str] = None


def _section(config: Any, *keys: str) -> Dict[str, Any]:
    node = config if isinstance(config, dict) else {}
    for key in keys:
        value = node.get(key)
        if value is None:
            value = {}
        if not isinstance(value, dict):
            raise InvalidTraceConfigError(f"'{'.'.join(keys)}' deve ser um mapa, recebido: {type(value).__name__}")
        node = value
    return node


def trace_settings(config: Optional[Dict[str, Any]]) -> TraceSettings:
    """
    Valida e extrai `engine.trace`.

    Raises:
        InvalidTraceConfigError: tipos ou valores inválidos.
    """
    section = _section(config or {}, "engine", "trace")

    enabled = section.get("enabled", False)
    if not isinstance(enabled, bool):
        raise InvalidTraceConfigError("engine.trace.enabled must be a bool")

    level = section.get("level", "INFO")
    if not isinstance(level, str) or level.upper() not in LEVELS:
        raise InvalidTraceConfigError(f"engine.trace.level must be one of {sorted(LEVELS)}")

    run_id = section.get("run_id")
    if run_id is not None and (not isinstance(run_id, str) or not run_id.strip()):
        raise InvalidTraceConfigError("engine.trace.run_id must be a non-empty string")

    return TraceSettings(enabled=enabled, level=level.upper(), run_id=run_id)


def trace_recorder_from_config(config: Optional[Dict[str, Any]]) -> Optional[TraceRecorder]:
    settings = trace_settings(config)
    if not settings.enabled:
        return None
    return TraceRecorder(run_id=settings.run_id, level=settings.level)


def hooks_from_config(
    config: Optional[Dict[str, Any]],
    *,
    recorder: Optional[TraceRecorder] = None,
) -> Hooks:
    """
    Monta os hooks de uma execução a partir da configuração.

    Args:
        config: Configuração efetiva (ex.: saída de `load_config`).
        recorder: Recorder a reutilizar quando o trace está habilitado;
            quando omitido, um novo é criado a partir da configuração.

    Returns:
        Hooks: hooks de trace, ou `Hooks()` vazio se desabilitado.
    """
    settings = trace_settings(config)
    if not settings.enabled:
        return Hooks()
    return (recorder or trace_recorder_from_config(config)).hooks()
