import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import aiohttp

from otdb.handlers.decorators import log_http_request
from otdb.models.config_model import ClientConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    """Status and raw body of a finished response, read while the connection was open."""
    status: int
    body: bytes
    url: str = ""
    encoding: str = "utf-8"

    def decode(self) -> str:
        """Strict decoding, for bodies that are going to be parsed."""
        return self.body.decode(self.encoding)

    @property
    def text(self) -> str:
        try:
            return self.body.decode(self.encoding, errors="replace")
        except LookupError:
            return self.body.decode("utf-8", errors="replace")


class HttpClient:
    """aiohttp session holder shared by every client clone."""

    def __init__(self, config: Optional[ClientConfig] = None):
        self.config = config or ClientConfig()
        self.headers = self.config.headers()
        self.session: Optional[aiohttp.ClientSession] = None

    async def init_session(self):
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(
                headers=self.headers,
                timeout=aiohttp.ClientTimeout(total=self.config.timeout),
            )
            logger.debug(f"HTTP session initialized with {len(self.headers)} headers")

    @log_http_request("GET")
    async def get(self, url: str, params: Optional[List[Tuple[str, str]]] = None) -> HttpResponse:
        if self.session is None or self.session.closed:
            await self.init_session()

        # params are appended to whatever query the url already carries
        async with self.session.get(url, params=params or None) as response:
            body = await response.read()
            return HttpResponse(
                status=response.status,
                body=body,
                url=str(response.url),
                encoding=response.charset or "utf-8",
            )

    async def close(self):
        if self.session and not self.session.closed:
            await self.session.close()
            logger.debug("HTTP session closed")
        self.session = None
