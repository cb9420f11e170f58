import functools
import time
from typing import Callable


class PrintExecutionTime:
    """Decorator that prints the average wall time of the wrapped filter.

    Silent unless ``ENABLED`` is set; the CLI turns it on with ``--timing``.
    """
    _func: Callable
    REPEATS: int = 1
    ENABLED: bool = False

    def __init__(self, func: Callable):
        self._func = func
        functools.update_wrapper(self, func)

    def __call__(self, *args, **kwargs):
        if not PrintExecutionTime.ENABLED:
            return self._func(*args, **kwargs)

        timings = []
        for _ in range(self.REPEATS):
            start_time = time.perf_counter()
            res = self._func(*args, **kwargs)
            timings.append(time.perf_counter() - start_time)

        self._report(sum(timings) / len(timings))

        return res

    def _report(self, average_time: float) -> None:
        print(f"Function: {self._func.__name__}\nTime: {average_time:.6f} secs\n")
