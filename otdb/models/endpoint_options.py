from __future__ import annotations
from dataclasses import dataclass, fields
from typing import List, Optional, Tuple

from otdb.exceptions.http_exceptions import InvalidOptionError
from otdb.models.options import Category, Difficulty, Kind
from otdb.utils.defaults import MAX_QUESTION_NUMBER

QueryParams = List[Tuple[str, str]]


@dataclass
class EndPointOptions:
    """
    Optional query parameters of a single request.

    Every option is written into the query at most once: `prepare` moves the
    set values into the parameter list and leaves the options empty.
    """
    question_number: Optional[int] = None
    category: Optional[Category] = None
    difficulty: Optional[Difficulty] = None
    kind: Optional[Kind] = None

    def set_question_number(self, number: int) -> EndPointOptions:
        if isinstance(number, bool) or not isinstance(number, int):
            raise InvalidOptionError(f"question number must be an integer, got {number!r}")
        if number > MAX_QUESTION_NUMBER:
            raise InvalidOptionError(f"question number must be at most {MAX_QUESTION_NUMBER}, got {number}")
        if number < 0:
            raise InvalidOptionError(f"question number can't be negative, got {number}")
        self.question_number = number
        return self

    def set_category(self, category: Category) -> EndPointOptions:
        self.category = _coerce(Category, category)
        return self

    def set_difficulty(self, difficulty: Difficulty) -> EndPointOptions:
        self.difficulty = _coerce(Difficulty, difficulty)
        return self

    def set_kind(self, kind: Kind) -> EndPointOptions:
        self.kind = _coerce(Kind, kind)
        return self

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def prepare(self, params: QueryParams) -> QueryParams:
        """Append the set options to `params` and consume them."""
        number = self._take("question_number")
        if number is not None:
            params.append(("amount", str(number)))

        for key, name in (("category", "category"), ("difficulty", "difficulty"), ("type", "kind")):
            option = self._take(name)
            if option is None:
                continue
            value = option.query_value()
            if value is not None:
                params.append((key, value))

        return params

    def _take(self, name: str):
        value = getattr(self, name)
        setattr(self, name, None)
        return value


def _coerce(enum_cls, value):
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidOptionError(f"{value!r} is not a valid {enum_cls.__name__}") from None
