"""
Testes do TraceRecorder (event log estruturado).

Os testes asseguram que:
- eventos contêm run_id, step, level, message e timestamp UTC
- campos extras são preservados
- o nível mínimo filtra eventos
- usado como hooks, o recorder emite pares before/after por Step
- um Step que falha não gera evento `after`
- o início de uma execução que falhou não contamina a próxima
- filhos concorrentes com o mesmo meta medem a própria duração
"""

import asyncio
from datetime import datetime

import pytest

from esteira import Pipeline, TraceRecorder
from esteira.core.traceability.event_log import step_label


def test_structured_log_event():
    recorder = TraceRecorder(run_id="run-1")
    recorder.log(step="load", level="INFO", message="hello", foo=1)

    ev = recorder.events[-1]
    assert ev["run_id"] == "run-1"
    assert ev["step"] == "load"
    assert ev["level"] == "INFO"
    assert ev["message"] == "hello"
    assert ev["foo"] == 1
    assert datetime.fromisoformat(ev["timestamp"]).utcoffset().total_seconds() == 0


def test_level_filtering():
    recorder = TraceRecorder(run_id="run-1", level="INFO")
    recorder.log(step="s", level="DEBUG", message="hidden")
    recorder.log(step="s", level="INFO", message="shown")
    assert [e["message"] for e in recorder.events] == ["shown"]


def test_run_id_is_generated_and_level_validated():
    assert TraceRecorder().run_id
    with pytest.raises(ValueError):
        TraceRecorder(level="TRACE")


def test_step_label_resolution(RunStep, calls):
    assert step_label({"name": "from-mapping"}) == "from-mapping"
    assert step_label(RunStep("from-attr", calls)) == "from-attr"
    assert step_label({}) == "dict"


@pytest.mark.asyncio
async def test_recorder_hooks_emit_before_after_pairs():
    recorder = TraceRecorder(run_id="run-1", level="DEBUG")
    pipeline = (
        Pipeline(hooks=recorder.hooks())
        .register(lambda d, m: None, {"name": "a"})
        .register(lambda d, m: None, {"name": "b"})
    )

    await pipeline.execute({})

    assert [(e["step"], e["phase"]) for e in recorder.events] == [
        ("a", "before"), ("a", "after"), ("b", "before"), ("b", "after"),
    ]
    afters = [e for e in recorder.events if e["phase"] == "after"]
    assert all(e["duration_ms"] >= 0 for e in afters)


@pytest.mark.asyncio
async def test_failed_step_has_no_after_event():
    recorder = TraceRecorder(run_id="run-1")

    async def fail(data, meta):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        await Pipeline(hooks=recorder.hooks()).register(fail, {"name": "fail"}).execute({})

    # nível INFO: o evento before (DEBUG) é filtrado e o after nunca ocorre
    assert recorder.events == []


@pytest.mark.asyncio
async def test_failed_run_does_not_leak_start_time_into_next_run():
    recorder = TraceRecorder(run_id="run-1")
    attempts = []

    async def flaky(data, meta):
        attempts.append(1)
        if len(attempts) == 1:
            raise RuntimeError("boom")

    pipeline = Pipeline(hooks=recorder.hooks()).register(flaky, {"name": "flaky"})
    data = {}

    with pytest.raises(RuntimeError):
        await pipeline.execute(data)
    await asyncio.sleep(0.3)
    await pipeline.execute(data)

    assert [e["step"] for e in recorder.events] == ["flaky"]
    assert recorder.events[-1]["duration_ms"] < 100
    assert recorder._started == {}


@pytest.mark.asyncio
async def test_concurrent_children_sharing_meta_measure_own_duration():
    recorder = TraceRecorder(run_id="run-1")
    meta = {"name": "shared"}

    async def wait(data, meta):
        await asyncio.sleep(data["delay"])

    async def child(delay):
        slot = {"delay": delay}
        await Pipeline(hooks=recorder.hooks()).register(wait, meta).execute(slot)

    # o filho lento começa primeiro e termina por último
    slow = asyncio.ensure_future(child(0.3))
    await asyncio.sleep(0.05)
    await child(0)
    await slow

    durations = [e["duration_ms"] for e in recorder.events]
    assert durations[0] < 100
    assert durations[1] >= 200
    assert recorder._started == {}
