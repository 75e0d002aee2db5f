from concurrent import futures
from typing import Any, Callable, List, Sequence

from database import Student


def split_into_chunks(items: Sequence[Any], num_workers: int) -> List[List[Any]]:
    """
    Split items into `num_workers` contiguous chunks of nearly equal size.

    The last `len(items) % num_workers` chunks get one extra item, so with two
    workers the first half has len // 2 items and the second the rest.
    """
    if num_workers < 1:
        raise ValueError("num_workers must be at least 1")

    total_items = len(items)
    base_chunk_size = total_items // num_workers
    remainder = total_items % num_workers

    chunks = []
    start_idx = 0

    for worker_idx in range(num_workers):
        # Last 'remainder' workers get an extra item
        extra = 1 if worker_idx >= num_workers - remainder else 0
        end_idx = start_idx + base_chunk_size + extra
        chunks.append(list(items[start_idx:end_idx]))
        start_idx = end_idx

    return chunks


class ChunkedWorkerPool:
    def __init__(self, items: Sequence[Any], func: Callable[..., Any], func_args: tuple = (), num_workers: int = 2):
        """
        items: List of items to process.
        func: Called once per chunk as func(worker_number, chunk, *func_args);
              worker numbers start at 1.
        num_workers: Number of concurrent workers.
        """
        self.items = items
        self.func_args = func_args
        self.func = func
        self.num_workers = num_workers

    def _worker(self, worker_number: int, chunk: List[Any]) -> Any:
        """Process the entire chunk by calling func once."""
        return self.func(worker_number, chunk, *self.func_args)

    def run(self) -> List[Any]:
        """
        Execute the processing in parallel using ThreadPoolExecutor.

        Blocks until every worker has finished; results come back in chunk
        order. An exception raised by a worker is re-raised here.
        """
        chunks = split_into_chunks(self.items, self.num_workers)

        with futures.ThreadPoolExecutor(max_workers=self.num_workers) as executor:
            jobs = [executor.submit(self._worker, idx, chunk) for idx, chunk in enumerate(chunks, 1)]
            futures.wait(jobs)
            results = [job.result() for job in jobs]

        return results


def process_students_concurrently(students: Sequence[Student], num_workers: int = 2,
                                  emit: Callable[[str], None] = print) -> List[List[Student]]:
    """
    Print each student from one of `num_workers` threads.

    Each worker only reads its own slice of the list. Output from different
    workers may interleave. Returns the chunks as the workers received them.
    """

    def print_chunk(worker_number: int, chunk: List[Student]) -> List[Student]:
        emit(f"\nWorker {worker_number} processing {len(chunk)} student(s):")
        for student in chunk:
            emit(f"Worker {worker_number}: {student}")
        return chunk

    pool = ChunkedWorkerPool(items=students, func=print_chunk, num_workers=num_workers)
    chunks = pool.run()
    emit("\nAll workers completed processing")
    return chunks
