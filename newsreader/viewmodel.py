from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Callable, Coroutine
from typing import Any, Generic, TypeVar

from .config import Settings, get_settings
from .logging import get_logger
from .models.news import NewsResponse
from .models.result import ApiResult, Error, Loading, Success
from .models.state import NewsUiState
from .services.repository import NewsRepository

T = TypeVar("T")

logger = get_logger("viewmodel")


class StateFlow(Generic[T]):
    """Observable holder of the latest value.

    ``update`` swaps the value in one step and notifies listeners
    synchronously; an update that produces an equal value is dropped.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._listeners: list[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    def update(self, fn: Callable[[T], T]) -> T:
        new = fn(self._value)
        if new is self._value or new == self._value:
            return self._value
        self._value = new
        for listener in list(self._listeners):
            try:
                listener(new)
            except Exception:
                logger.exception("State listener %r failed", listener)
        return new

    def subscribe(self, listener: Callable[[T], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def watch(self) -> AsyncIterator[T]:
        """Yield the current value, then the latest value after each change.

        Intermediate values are skipped when the consumer is slower than
        the producer.
        """
        changed = asyncio.Event()
        unsubscribe = self.subscribe(lambda _: changed.set())
        try:
            yield self._value
            while True:
                await changed.wait()
                changed.clear()
                yield self._value
        finally:
            unsubscribe()


class NewsViewModel:
    """Owns the news list state and sequences gateway calls into it.

    Must be created inside a running event loop: the initial headline load
    starts from the constructor. Call :meth:`close` (or use ``async with``)
    when the owning screen goes away.
    """

    def __init__(
        self,
        repository: NewsRepository,
        settings: Settings | None = None,
        debounce: float | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._repository = repository
        self._debounce = settings.search_debounce if debounce is None else debounce
        self._state: StateFlow[NewsUiState] = StateFlow(NewsUiState())
        self._tasks: set[asyncio.Task[Any]] = set()
        self._search_task: asyncio.Task[Any] | None = None
        self._search_generation = 0
        self._closed = False

        self._load_headlines(None)

    @property
    def ui_state(self) -> StateFlow[NewsUiState]:
        return self._state

    @property
    def state(self) -> NewsUiState:
        return self._state.value

    def refresh(self) -> None:
        self._ensure_open()
        logger.debug("refresh")
        self._set(is_refreshing=True, error=None)
        self._launch(self._refresh(self.state.selected_category))

    def search(self, query: str) -> None:
        self._ensure_open()
        self._cancel_search()
        # only the search task raises is_searching, and it was just cancelled
        self._set(search_query=query, is_searching=False)

        if not query.strip():
            self._load_headlines(None)
            return

        logger.debug("search scheduled for %r", query)
        self._search_task = self._launch(
            self._debounced_search(query, self._search_generation)
        )

    def clear_search(self) -> None:
        self._ensure_open()
        logger.debug("clear search")
        self._cancel_search()
        self._set(search_query="", is_searching=False)
        self._load_headlines(self.state.selected_category)

    def select_category(self, category: str | None) -> None:
        self._ensure_open()
        logger.debug("select category %r", category)
        self._load_headlines(category)

    def clear_error(self) -> None:
        self._ensure_open()
        self._set(error=None)

    async def wait_idle(self) -> None:
        """Wait until every operation started so far has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._search_generation += 1
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        logger.debug("view model closed, %d task(s) cancelled", len(tasks))

    async def __aenter__(self) -> NewsViewModel:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def _load_headlines(self, category: str | None) -> None:
        self._launch(self._collect_headlines(category))

    async def _collect_headlines(self, category: str | None) -> None:
        async for result in self._repository.stream_headlines(category):
            if isinstance(result, Loading):
                self._set(is_loading=True, error=None, selected_category=category)
            elif isinstance(result, Success):
                self._set_page(result.data, is_loading=False, error=None)
            elif isinstance(result, Error):
                self._set(is_loading=False, error=result.message)

    async def _refresh(self, category: str | None) -> None:
        result = await self._repository.refresh_headlines(category)
        self._apply(result, "is_refreshing")

    async def _debounced_search(self, query: str, generation: int) -> None:
        await asyncio.sleep(self._debounce)
        if generation != self._search_generation:
            return
        self._set(is_searching=True, error=None)

        logger.info("searching for %r", query)
        result = await self._repository.search(query)
        if generation != self._search_generation:
            return
        self._apply(result, "is_searching")

    def _apply(self, result: ApiResult[NewsResponse], flag: str) -> None:
        if isinstance(result, Success):
            self._set_page(result.data, **{flag: False, "error": None})
        elif isinstance(result, Error):
            self._set(**{flag: False, "error": result.message})

    def _cancel_search(self) -> None:
        self._search_generation += 1
        if self._search_task is not None and not self._search_task.done():
            self._search_task.cancel()
        self._search_task = None

    def _set_page(self, page: NewsResponse, **changes: Any) -> None:
        self._set(articles=page.articles, total_results=page.total_results, **changes)

    def _set(self, **changes: Any) -> None:
        def apply(state: NewsUiState) -> NewsUiState:
            if all(getattr(state, name) == value for name, value in changes.items()):
                return state
            return state.model_copy(update=changes)

        self._state.update(apply)

    def _launch(self, coro: Coroutine[Any, Any, None]) -> asyncio.Task[None]:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error("View model task failed", exc_info=task.exception())

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("NewsViewModel is closed")
