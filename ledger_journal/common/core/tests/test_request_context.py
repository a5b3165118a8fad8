import asyncio

import pytest

from ledger_journal.common.core import request_context


def test_generate_run_id_sets_context():
    request_context.clear_run_id()

    run_id = request_context.generate_run_id()

    assert request_context.get_run_id() == run_id
    request_context.clear_run_id()
    assert request_context.get_run_id() is None


def test_set_run_id_rejects_empty():
    with pytest.raises(ValueError):
        request_context.set_run_id("")


def test_run_id_visible_in_worker_thread():
    async def scenario():
        request_context.set_run_id("run-1")
        return await asyncio.to_thread(request_context.get_run_id)

    assert asyncio.run(scenario()) == "run-1"
