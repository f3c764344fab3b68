from typing import Dict, Union

from otdb.utils.links import BASE_URL

DEFAULT_QUESTION_NUMBER = 10
MAX_QUESTION_NUMBER = 50

USER_AGENT = "Python-OTDB-wrapper"


def base_headers(user_agent: str = USER_AGENT) -> Dict[str, str]:
    return {
        "Accept": "application/json",
        "User-Agent": user_agent,
    }


def base_client_config() -> Dict[str, Union[str, float]]:
    return {
        "base_url": BASE_URL,
        "user_agent": USER_AGENT,
        "timeout": 30.0,
    }
