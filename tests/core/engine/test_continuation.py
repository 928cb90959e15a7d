"""
Testes da continuação com preservação de dado (`wrap`).

Os testes asseguram que:
- a continuação resolve com o mesmo objeto recebido
- o valor retornado pela operação é descartado
- operação ausente não gera invocação
- operações síncronas e assíncronas são suportadas
- exceções propagam sem encapsulamento
"""

import pytest

from esteira.core.engine.continuation import resolve, wrap


@pytest.mark.asyncio
async def test_wrap_returns_same_data_and_discards_result():
    received = []

    async def op(data, meta):
        received.append((data, meta))
        return {"replacement": True}

    data = {"x": 1}
    meta = {"name": "op"}
    out = await wrap(op, meta)(data)

    assert out is data
    assert received == [(data, meta)]
    assert received[0][1] is meta


@pytest.mark.asyncio
async def test_absent_operation_is_a_noop():
    data = {"x": 1}
    assert await wrap(None, {})(data) is data
    assert data == {"x": 1}


@pytest.mark.asyncio
async def test_sync_operation_is_invoked():
    def op(data, meta):
        data["sync"] = True
        return "ignored"

    data = {}
    assert await wrap(op, {})(data) is data
    assert data == {"sync": True}


@pytest.mark.asyncio
async def test_failure_propagates_unchanged():
    err = ValueError("boom")

    async def op(data, meta):
        raise err

    with pytest.raises(ValueError) as excinfo:
        await wrap(op, {})({})
    assert excinfo.value is err


@pytest.mark.asyncio
async def test_resolve_awaits_only_awaitables():
    async def coro():
        return 3

    assert await resolve(coro()) == 3
    assert await resolve(4) == 4
    assert await resolve(None) is None
