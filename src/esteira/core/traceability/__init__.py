# src/esteira/core/traceability/__init__.py
"""
Rastreabilidade da Esteira.

- event_log → `TraceRecorder`, hooks que registram eventos estruturados
  (run_id, step, level, message, timestamp UTC) por Step executado.
"""
