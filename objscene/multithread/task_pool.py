# objscene/multithread/task_pool.py
# ---------------------------------------------------------------
# Простой пул задач на основе concurrent.futures.
# Разделы (shape, material) независимы – их можно строить параллельно,
# результаты собираются в порядке постановки.
# ---------------------------------------------------------------

from concurrent.futures import ThreadPoolExecutor


class TaskPool:
    """Пул готового количества потоков; задачи принимаются как callables."""
    def __init__(self, max_workers=None):
        self.executor = ThreadPoolExecutor(max_workers=max_workers)
        self._shutdown = False

    def submit(self, fn, *args, **kwargs):
        """Отправить задачу в пул, вернуть Future."""
        if self._shutdown:
            raise RuntimeError("TaskPool already shut down")
        return self.executor.submit(fn, *args, **kwargs)

    def map_ordered(self, fn, items):
        """Выполнить `fn(*item)` для каждого элемента; результаты – в исходном порядке."""
        futures = [self.submit(fn, *item) for item in items]
        return [f.result() for f in futures]   # пробрасывает исключения задач

    def shutdown(self, wait=True):
        self._shutdown = True
        self.executor.shutdown(wait=wait, cancel_futures=not wait)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown(wait=True)
