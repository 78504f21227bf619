import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from bulbit.async_job import AsyncJob, run_async


def test_run_async_without_executor_runs_immediately():
    marker = object()
    job = run_async(lambda x: x, marker)
    assert job.is_ready()
    assert job.result() is marker


def test_run_async_with_executor_returns_each_result():
    with ThreadPoolExecutor(max_workers=4) as pool:
        jobs = [run_async(lambda x: x, i, executor=pool) for i in range(20)]
        results = [job.result() for job in jobs]
    assert results == list(range(20))


def test_wait_runs_unstarted_job_in_calling_thread():
    seen = []
    job = AsyncJob(lambda: seen.append(threading.current_thread()) or "done")
    assert not job.is_ready()
    job.wait()
    assert job.is_ready()
    assert seen == [threading.current_thread()]
    assert job.result() == "done"


def test_job_runs_only_once():
    calls = []
    job = AsyncJob(lambda: calls.append(1))
    job.run()
    job.run()
    job.wait()
    assert len(calls) == 1
    assert job.started


def test_error_is_raised_from_result():
    def boom():
        raise ValueError("bad input")

    job = run_async(boom)
    assert job.is_ready()
    with pytest.raises(ValueError, match="bad input"):
        job.result()


def test_result_waits_for_job_running_elsewhere():
    gate = threading.Event()
    job = AsyncJob(lambda: gate.wait(5) and "finished")
    worker = threading.Thread(target=job.run)
    worker.start()
    gate.set()
    assert job.result() == "finished"
    worker.join()