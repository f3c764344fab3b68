from __future__ import annotations
from enum import IntEnum
from typing import Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field, field_validator

from otdb.models.options import Category, Difficulty, Kind
from otdb.utils.encoding import decode_base64_list, decode_base64_text

T = TypeVar("T")


class ResponseCode(IntEnum):
    """Application level outcome sent inside a successful HTTP response."""
    SUCCESS = 0
    NO_RESULTS = 1
    INVALID_PARAMETER = 2
    TOKEN_NOT_FOUND = 3
    TOKEN_EMPTY = 4

    @classmethod
    def from_wire(cls, value: int) -> ResponseCode:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"response code must be an integer, got {value!r}")
        if not 0 <= value <= 4:
            raise ValueError(f"invalid response code {value}, expected a number between 0 and 4")
        return cls(value)


class ResponseModel(BaseModel):
    class Config:
        frozen = True
        populate_by_name = True


class Trivia(ResponseModel):
    """A single question. Every text field is base64 encoded on the wire."""
    category: Category
    kind: Kind = Field(alias="type")
    difficulty: Difficulty
    question: str
    correct_answer: str
    incorrect_answers: List[str]

    @field_validator("category", mode="before")
    @classmethod
    def decode_category(cls, v):
        if isinstance(v, Category):
            return v
        return Category.from_base64(v)

    @field_validator("kind", mode="before")
    @classmethod
    def decode_kind(cls, v):
        if isinstance(v, Kind):
            return v
        return Kind.from_base64(v)

    @field_validator("difficulty", mode="before")
    @classmethod
    def decode_difficulty(cls, v):
        if isinstance(v, Difficulty):
            return v
        return Difficulty.from_base64(v)

    @field_validator("question", "correct_answer", mode="before")
    @classmethod
    def decode_text(cls, v):
        return decode_base64_text(v)

    @field_validator("incorrect_answers", mode="before")
    @classmethod
    def decode_answers(cls, v):
        if not isinstance(v, list):
            raise ValueError(f"expected a list of base64 strings, got {type(v).__name__}")
        return decode_base64_list(v)

    def all_answers(self) -> List[str]:
        return [self.correct_answer, *self.incorrect_answers]


class BaseResponse(ResponseModel, Generic[T]):
    response_code: ResponseCode
    results: T

    @field_validator("response_code", mode="before")
    @classmethod
    def decode_response_code(cls, v):
        return ResponseCode.from_wire(v)

    @property
    def is_success(self) -> bool:
        return self.response_code is ResponseCode.SUCCESS


class CategoryQuestionCount(ResponseModel):
    total_questions: int = Field(alias="total_question_count")
    easy_questions: int = Field(alias="total_easy_question_count")
    medium_questions: int = Field(alias="total_medium_question_count")
    hard_questions: int = Field(alias="total_hard_question_count")


class CategoryDetails(ResponseModel):
    category_id: int
    question_count: CategoryQuestionCount = Field(alias="category_question_count")

    @property
    def category(self) -> Category:
        return Category.from_id(self.category_id)


class GlobalDetail(ResponseModel):
    total_questions: int = Field(alias="total_num_of_questions")
    pending_questions: int = Field(alias="total_num_of_pending_questions")
    verified_questions: int = Field(alias="total_num_of_verified_questions")
    rejected_questions: int = Field(alias="total_num_of_rejected_questions")


class GlobalDetails(ResponseModel):
    overall: GlobalDetail
    categories: Dict[Category, GlobalDetail]

    @field_validator("categories", mode="before")
    @classmethod
    def decode_categories(cls, v):
        # keys arrive as stringified ids: {"9": {...}, "10": {...}}
        if not isinstance(v, dict):
            raise ValueError(f"expected an object keyed by category id, got {type(v).__name__}")

        decoded = {}
        for key, detail in v.items():
            if isinstance(key, Category):
                decoded[key] = detail
                continue
            try:
                category_id = int(key)
            except (TypeError, ValueError):
                raise ValueError(f"category key is not a number: {key!r}") from None
            decoded[Category.from_id(category_id)] = detail
        return decoded


class TokenResponse(ResponseModel):
    response_code: ResponseCode
    response_message: Optional[str] = None
    token: str

    @field_validator("response_code", mode="before")
    @classmethod
    def decode_response_code(cls, v):
        return ResponseCode.from_wire(v)


class ResetTokenResponse(ResponseModel):
    response_code: ResponseCode
    token: str

    @field_validator("response_code", mode="before")
    @classmethod
    def decode_response_code(cls, v):
        return ResponseCode.from_wire(v)
