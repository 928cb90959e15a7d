# src/esteira/core/pipeline/__init__.py
"""
# Pipeline Core — Esteira

## Componentes

- **types**: `StepRecord`, `Hooks` e aliases de assinatura
- **step**: `RunnableStep` (Protocol) e `normalize_step`
- **registry**: `StepRegistry`, sequência append-only de Steps
- **fanout**: `build_fanout_step`, Step de fan-out/fan-in
- **slots**: `append_slot` / `assign_slot`

## Invariantes

- Steps são normalizados no registro e nunca reordenados
- Steps se comunicam apenas mutando o dado compartilhado
"""
