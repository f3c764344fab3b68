from __future__ import annotations
import logging
from typing import Any, Generator, Generic, Optional, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from otdb.exceptions.http_exceptions import DecodeError, InternalServerError, UnsuccessfulRequestError
from otdb.http.http_client import HttpClient, HttpResponse
from otdb.models.endpoint_options import EndPointOptions, QueryParams
from otdb.models.options import Category, Difficulty, Kind

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Request(Generic[T]):
    """
    A GET request against one endpoint, decoded into `response_type`.

    Options are set through the chainable methods and the request is sent
    with `await request` (or `await request.send()`). The token is the one the
    client held when the request was created.
    """

    def __init__(
        self,
        http: HttpClient,
        token: Optional[str],
        endpoint: str,
        response_type: Type[T],
        *,
        options: Optional[EndPointOptions] = None,
    ):
        self.http = http
        self.token = token
        self.endpoint = endpoint
        self.response_type = response_type
        self.options = options if options is not None else EndPointOptions()

    def question_number(self, number: int) -> Request[T]:
        self.options.set_question_number(number)
        return self

    def category(self, category: Category) -> Request[T]:
        self.options.set_category(category)
        return self

    def difficulty(self, difficulty: Difficulty) -> Request[T]:
        self.options.set_difficulty(difficulty)
        return self

    def kind(self, kind: Kind) -> Request[T]:
        self.options.set_kind(kind)
        return self

    def prepare(self) -> QueryParams:
        params: QueryParams = []
        if self.token is not None:
            params.append(("token", self.token))
        return self.options.prepare(params)

    async def send(self) -> T:
        params = self.prepare()
        response = await self.http.get(self.endpoint, params)
        return self.handle_response(response)

    def handle_response(self, response: HttpResponse) -> T:
        if response.status == 200:
            try:
                body = response.decode()
            except (UnicodeDecodeError, LookupError) as e:
                logger.debug(f"Undecodable body from {response.url or self.endpoint}: {e}")
                raise DecodeError(e, body=response.text) from e
            return self.decode(body)
        if response.status >= 500:
            logger.error(f"Internal server error ({response.status}) from {response.url or self.endpoint}")
            raise InternalServerError(response.text, status=response.status)
        logger.warning(f"Unsuccessful response ({response.status}) from {response.url or self.endpoint}")
        raise UnsuccessfulRequestError(response.status, response.text)

    def decode(self, body: str) -> T:
        try:
            return TypeAdapter(self.response_type).validate_json(body)
        except ValidationError as e:
            logger.debug(f"Failed to decode {self.response_type!r}: {e}")
            raise DecodeError(e, body=body) from e

    def __await__(self) -> Generator[Any, None, T]:
        return self.send().__await__()

    def __repr__(self) -> str:
        return (
            f"Request(endpoint={self.endpoint!r}, token={self.token!r}, "
            f"options={self.options!r})"
        )
