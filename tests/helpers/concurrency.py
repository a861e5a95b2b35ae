import threading


def run_concurrent(target_fn, n_threads: int, timeout: float = 5.0):
    """Run ``target_fn(i)`` on *n_threads* threads released together.

    Returns the per-thread results (``None`` for failed threads) and the
    exceptions that were raised, failures only.
    """
    results = [None] * n_threads
    errors: list[Exception] = []
    lock = threading.Lock()
    start_barrier = threading.Barrier(n_threads)

    def worker(i):
        try:
            start_barrier.wait(timeout=timeout)
            results[i] = target_fn(i)
        except Exception as e:
            with lock:
                errors.append(e)

    threads = [threading.Thread(target=worker, args=(i,), daemon=True) for i in range(n_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=timeout + 1.0)
    return results, errors
