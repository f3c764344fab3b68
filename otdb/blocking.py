"""
Blocking wrappers around the asynchronous client.

Every blocking Client owns a private event loop and runs each call to
completion on it, so it can be used from plain synchronous code. Calls on
one Client are serialized; use `clone()` to get an independent Client per
thread.
"""
from __future__ import annotations
import asyncio
import logging
import threading
from typing import Awaitable, Generic, List, Optional, Type, TypeVar

from otdb.client import Client as AsyncClient
from otdb.handlers.decorators import handle_app_errors
from otdb.models.config_model import ClientConfig
from otdb.models.options import Category, Difficulty, Kind
from otdb.models.responses import BaseResponse, CategoryDetails, GlobalDetails, Trivia
from otdb.request import Request as AsyncRequest

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Request(Generic[T]):
    def __init__(self, inner: AsyncRequest[T], client: Client):
        self.inner = inner
        self._client = client

    def question_number(self, number: int) -> Request[T]:
        self.inner.question_number(number)
        return self

    def category(self, category: Category) -> Request[T]:
        self.inner.category(category)
        return self

    def difficulty(self, difficulty: Difficulty) -> Request[T]:
        self.inner.difficulty(difficulty)
        return self

    def kind(self, kind: Kind) -> Request[T]:
        self.inner.kind(kind)
        return self

    @property
    def options(self):
        return self.inner.options

    @handle_app_errors
    def send(self) -> T:
        return self._client._run(self.inner.send())

    def __repr__(self) -> str:
        return repr(self.inner)


class Client:
    def __init__(self, *, token: Optional[str] = None, config: Optional[ClientConfig] = None):
        self._loop = asyncio.new_event_loop()
        self._lock = threading.Lock()
        self._inner = AsyncClient(token=token, config=config)

    @property
    def token(self) -> Optional[str]:
        return self._inner.token

    def set_token(self, token) -> None:
        self._inner.set_token(token)

    def clear_token(self) -> None:
        self._inner.clear_token()

    def clone(self) -> Client:
        """A client with its own loop and transport, carrying the same token."""
        return Client(token=self._inner.token, config=self._inner.config)

    @handle_app_errors
    def generate_token(self) -> str:
        return self._run(self._inner.generate_token())

    @handle_app_errors
    def reset_token(self) -> str:
        return self._run(self._inner.reset_token())

    def trivia(self) -> Request[BaseResponse[List[Trivia]]]:
        return Request(self._inner.trivia(), self)

    def category_details(self, category: Category) -> Request[CategoryDetails]:
        return Request(self._inner.category_details(category), self)

    def global_details(self) -> Request[GlobalDetails]:
        return Request(self._inner.global_details(), self)

    def new_request(self, endpoint: str, response_type: Type[T]) -> Request[T]:
        return Request(self._inner.new_request(endpoint, response_type), self)

    def _run(self, awaitable: Awaitable[T]) -> T:
        with self._lock:
            if self._loop.is_closed():
                if asyncio.iscoroutine(awaitable):
                    awaitable.close()
                raise RuntimeError("client is closed")
            return self._loop.run_until_complete(awaitable)

    @property
    def closed(self) -> bool:
        return self._loop.is_closed()

    def close(self) -> None:
        with self._lock:
            if self._loop.is_closed():
                return
            self._loop.run_until_complete(self._inner.close())
            self._loop.close()
            logger.debug("Blocking client closed")

    def __enter__(self) -> Client:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return repr(self._inner)
