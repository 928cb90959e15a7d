# src/esteira/core/__init__.py
"""
Core da Esteira.

Componentes principais:
    - pipeline     → StepRecord, Hooks, normalização de Steps, registry,
                     fan-out/fan-in e alocadores de slots
    - engine       → continuação com preservação de dado, planner e Pipeline
    - config       → loader YAML/JSON, deep-merge e hooks a partir de config
    - traceability → TraceRecorder (event log estruturado)

Princípios fundamentais:
    - A forma de um Step é resolvida uma vez, no registro
    - O dado compartilhado é passado por referência, nunca substituído
    - Falhas propagam sem encapsulamento
"""
