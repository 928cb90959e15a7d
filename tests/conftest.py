"""
Fixtures compartilhados para testes da Esteira.

Este módulo define fixtures reutilizáveis que fornecem:
- configurações YAML mínimas (defaults + local) para o loader
- um registrador de chamadas para verificar ordem de execução
- Steps dummy baseados em objeto (duck typing, sem herança)

Decisões arquiteturais:
    - Fixtures são síncronas; testes assíncronos usam `@pytest.mark.asyncio`
    - Nenhuma fixture executa pipeline
    - Imports do core são realizados de forma lazy

Limites explícitos:
    - Não substituir testes de integração
    - Não conter lógica condicional complexa
"""

import pytest


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def config_defaults_yaml() -> str:
    """
    YAML de defaults semelhante a um `esteira.defaults.yaml` real.

    Trace desabilitado por padrão; `run_id` nulo para ser gerado.
    """
    return """\
engine:
  trace:
    enabled: false
    level: INFO
    run_id: null
"""


@pytest.fixture
def config_local_yaml() -> str:
    """YAML de override local que habilita o trace em nível DEBUG."""
    return """\
engine:
  trace:
    enabled: true
    level: DEBUG
    run_id: run-test-001
"""


# =====================================================
# Pipeline fixtures
# =====================================================

@pytest.fixture
def calls() -> list:
    """Lista compartilhada onde Steps e hooks registram sua invocação."""
    return []


@pytest.fixture
def RunStep():
    """
    Fixture factory que fornece uma classe de Step baseada em objeto.

    A classe retornada expõe `run(data, step)` assíncrono, grava o
    próprio nome em `data["seen"]` e guarda o `step` recebido para
    inspeção pelos testes.

    Returns:
        type: Classe `_RunStep(name, calls)`.
    """

    class _RunStep:
        def __init__(self, name: str, calls: list):
            self.name = name
            self.calls = calls
            self.received_step = None

        async def run(self, data, step):
            self.received_step = step
            self.calls.append(self.name)
            data.setdefault("seen", []).append(self.name)
            return "ignored"

    return _RunStep
