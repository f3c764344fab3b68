from enum import Enum
from typing import Final, Optional, Dict, Union
from urllib.parse import urlencode, quote_plus

BASE_URL: Final[str] = "https://opentdb.com"


class APIEndpoint(str, Enum):
    # Questions
    TRIVIA = "/api.php"

    # Session tokens
    TOKEN = "/api_token.php"

    # Statistics
    CATEGORY_COUNT = "/api_count.php"
    GLOBAL_COUNT = "/api_count_global.php"


def build_url(
    endpoint: APIEndpoint,
    query_params: Optional[Dict[str, Union[str, int]]] = None,
    *,
    base_url: str = BASE_URL,
) -> str:
    url = base_url.rstrip("/") + endpoint.value

    if query_params:
        query_dict = {k: v for k, v in query_params.items() if v is not None}
        if query_dict:
            url += "?" + urlencode(query_dict, quote_via=quote_plus)

    return url
