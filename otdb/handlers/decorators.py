# otdb/handlers/decorators.py
import asyncio
import functools
import logging
from typing import Callable, TypeVar, ParamSpec, cast
from functools import wraps

import aiohttp

from otdb.exceptions.base_exceptions import OTDBError
from otdb.exceptions.http_exceptions import TransportError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def log_http_request(method: str = "GET"):
    """
    Trace a transport call and turn network failures into TransportError.

    A single attempt is made, the caller decides whether to try again.
    """
    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        async def wrapper(self, url: str, params=None, *args, **kwargs):
            logger.info(f"[{method}] → URL: {url}")
            logger.debug(f"[{method}] Headers: {self.headers}")
            if params:
                logger.debug(f"[{method}] Query: {_redact(params)}")

            try:
                response = await func(self, url, params, *args, **kwargs)
            except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
                logger.warning(f"[{method}] request error: {ex!r} → {url}")
                raise TransportError(ex, url=url) from ex

            logger.info(f"[{method}] ← Response status: {response.status}")
            logger.debug(f"[{method}] Response content (up to 300 chars): {response.text[:300]}")
            return response

        return wrapper  # type: ignore
    return decorator


def handle_app_errors(func: Callable[P, R]) -> Callable[P, R]:
    """Log library errors on their way out, never swallows them."""
    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except OTDBError as e:
            logger.error(f"[{e.__class__.__name__}] {e} (code={e.code})")
            raise
    return cast(Callable[P, R], wrapper)


def _redact(params):
    return [(k, "***" if k == "token" else v) for k, v in params]
