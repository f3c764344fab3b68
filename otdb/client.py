from __future__ import annotations
import logging
from typing import List, Optional, Type, TypeVar

from otdb.exceptions.http_exceptions import InvalidOptionError
from otdb.http.http_client import HttpClient
from otdb.models.config_model import ClientConfig
from otdb.models.options import Category
from otdb.models.responses import BaseResponse, CategoryDetails, GlobalDetails, ResetTokenResponse, TokenResponse, Trivia
from otdb.request import Request
from otdb.utils.defaults import DEFAULT_QUESTION_NUMBER
from otdb.utils.links import APIEndpoint, build_url

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Client:
    """
    Asynchronous OpenTDB client.

    Holds an optional session token and the HTTP transport. Clones share the
    transport (and its connection pool) but each owns its token.

        async with Client() as client:
            client.set_token(await client.generate_token())
            response = await client.trivia().question_number(20)
    """

    def __init__(
        self,
        http: Optional[HttpClient] = None,
        *,
        token: Optional[str] = None,
        config: Optional[ClientConfig] = None,
    ):
        if http is None:
            http = self.create_http_client(config)
        self.http = http
        self.config = http.config
        self._token: Optional[str] = None
        if token is not None:
            self.set_token(token)

    @staticmethod
    def create_http_client(config: Optional[ClientConfig] = None) -> HttpClient:
        return HttpClient(config or ClientConfig())

    @property
    def token(self) -> Optional[str]:
        return self._token

    def set_token(self, token) -> None:
        if token is None:
            self.clear_token()
            return
        self._token = str(token)

    def clear_token(self) -> None:
        self._token = None

    def clone(self) -> Client:
        return Client(self.http, token=self._token)

    def _url(self, endpoint: APIEndpoint, **query) -> str:
        return build_url(endpoint, query, base_url=self.config.base_url)

    async def generate_token(self) -> str:
        """Request a new session token. The token is returned, not stored."""
        request = Request(self.http, None, self._url(APIEndpoint.TOKEN, command="request"), TokenResponse)
        response = await request.send()
        logger.info("Session token generated")
        return response.token

    async def reset_token(self) -> str:
        """
        Reset the stored token on the server and return the token it sends back.

        Without a stored token this generates one and, unlike `generate_token`,
        stores it on the client.
        """
        if self._token is None:
            token = await self.generate_token()
            self.set_token(token)
            return token

        request = Request(self.http, self._token, self._url(APIEndpoint.TOKEN, command="reset"), ResetTokenResponse)
        response = await request.send()
        logger.info("Session token reset")
        return response.token

    def trivia(self) -> Request[BaseResponse[List[Trivia]]]:
        request = Request(
            self.http,
            self._token,
            self._url(APIEndpoint.TRIVIA, encode="base64"),
            BaseResponse[List[Trivia]],
        )
        return request.question_number(DEFAULT_QUESTION_NUMBER)

    def category_details(self, category: Category) -> Request[CategoryDetails]:
        try:
            category = Category.from_id(int(category))
        except (TypeError, ValueError) as e:
            raise InvalidOptionError(f"category details need a concrete category: {e}") from None

        return Request(self.http, None, self._url(APIEndpoint.CATEGORY_COUNT, category=category.value), CategoryDetails)

    def global_details(self) -> Request[GlobalDetails]:
        return Request(self.http, None, self._url(APIEndpoint.GLOBAL_COUNT), GlobalDetails)

    def new_request(self, endpoint: str, response_type: Type[T]) -> Request[T]:
        return Request(self.http, self._token, str(endpoint), response_type)

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"Client(token={self._token!r})"
