# src/esteira/core/engine/__init__.py
"""
Engine da Esteira.

Componentes principais:
    - continuation → `wrap` / `resolve`, continuação que preserva o dado
    - planner      → cadeia (before, step, after) por Step
    - engine       → `Pipeline` (register, each, execute)

Invariantes:
    - Steps executam estritamente na ordem de registro
    - before termina antes do Step, que termina antes do after
    - A primeira falha encerra a execução
"""
