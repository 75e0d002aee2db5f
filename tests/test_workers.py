import threading

import pytest

from workers import ChunkedWorkerPool, process_students_concurrently, split_into_chunks


@pytest.mark.parametrize('n', [0, 1, 2, 5, 6, 11])
def test_two_way_split_sizes(n):
    items = list(range(n))
    first, second = split_into_chunks(items, 2)

    assert len(first) == n // 2
    assert len(second) == n - n // 2
    assert first + second == items


def test_split_into_more_workers_keeps_order():
    chunks = split_into_chunks(list(range(10)), 3)

    assert [len(c) for c in chunks] == [3, 3, 4]
    assert sum(chunks, []) == list(range(10))


def test_split_rejects_zero_workers():
    with pytest.raises(ValueError):
        split_into_chunks([1, 2, 3], 0)


def test_pool_runs_each_chunk_on_its_own_worker():
    thread_names = {}
    # Both workers have to be running at the same time to get past this
    both_running = threading.Barrier(2)

    def record(worker_number, chunk, offset):
        both_running.wait(timeout=5)
        thread_names[worker_number] = threading.current_thread().name
        return [item + offset for item in chunk]

    pool = ChunkedWorkerPool(items=[1, 2, 3, 4], func=record, func_args=(10,), num_workers=2)

    assert pool.run() == [[11, 12], [13, 14]]
    assert set(thread_names) == {1, 2}
    assert thread_names[1] != thread_names[2]


def test_pool_reraises_worker_errors():
    def boom(worker_number, chunk):
        raise RuntimeError("worker failed")

    with pytest.raises(RuntimeError):
        ChunkedWorkerPool(items=[1, 2], func=boom).run()


def test_process_students_concurrently(sample_students):
    lines = []

    chunks = process_students_concurrently(sample_students, num_workers=2, emit=lines.append)

    assert chunks == [sample_students[:3], sample_students[3:]]
    worker_one = [line for line in lines if line.startswith('Worker 1: ')]
    worker_two = [line for line in lines if line.startswith('Worker 2: ')]
    assert len(worker_one) == 3
    assert len(worker_two) == 3
    assert lines[-1] == "\nAll workers completed processing"


def test_process_odd_number_of_students(sample_students):
    lines = []

    first, second = process_students_concurrently(sample_students[:5], emit=lines.append)

    assert len(first) == 2
    assert len(second) == 3
    assert set(first).isdisjoint(second)
    assert set(first) | set(second) == set(sample_students[:5])
