# runtime/hooks.py
import threading
from collections.abc import Callable
from typing import Protocol

CancelCheck = Callable[[], bool]


class SearchHooks(Protocol):
    def search_start(self, *, algorithm, source, target, nodes): ...
    def settle(self, node, *, distance, step): ...
    def examine(self, u, v, *, weight, improved): ...
    def search_end(self, outcome, *, wall_ms): ...
    def error(self, *, algorithm, exc: BaseException, **kw): ...


class NoopHooks:
    def search_start(self, **_):
        pass

    def settle(self, *_, **__):
        pass

    def examine(self, *_, **__):
        pass

    def search_end(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass


class CancelToken:
    """
    Cooperative cancellation flag. Searches poll it between frontier pops;
    pass the token itself (it is callable) as ``cancel=``.
    """

    def __init__(self):
        self._ev = threading.Event()

    def cancel(self) -> None:
        self._ev.set()

    @property
    def cancelled(self) -> bool:
        return self._ev.is_set()

    def __call__(self) -> bool:
        return self._ev.is_set()
