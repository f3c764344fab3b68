from __future__ import annotations
from enum import Enum, IntEnum
from typing import Dict, Optional

from otdb.utils.encoding import decode_base64_text


class Kind(str, Enum):
    """Question kind, rendered as the `type` query parameter."""
    ANY = "any"
    TRUE_OR_FALSE = "boolean"
    MULTIPLE_CHOICE = "multiple"

    def query_value(self) -> Optional[str]:
        if self is Kind.ANY:
            return None
        return self.value

    @classmethod
    def from_wire(cls, text: str) -> Kind:
        for kind in (cls.TRUE_OR_FALSE, cls.MULTIPLE_CHOICE):
            if kind.value == text:
                return kind
        raise ValueError(f"unknown question type: {text!r}")

    @classmethod
    def from_base64(cls, encoded: str) -> Kind:
        return cls.from_wire(decode_base64_text(encoded))


class Difficulty(str, Enum):
    ANY = "any"
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    def query_value(self) -> Optional[str]:
        if self is Difficulty.ANY:
            return None
        return self.value

    @classmethod
    def from_wire(cls, text: str) -> Difficulty:
        for difficulty in (cls.EASY, cls.MEDIUM, cls.HARD):
            if difficulty.value == text:
                return difficulty
        raise ValueError(f"unknown difficulty: {text!r}")

    @classmethod
    def from_base64(cls, encoded: str) -> Difficulty:
        return cls.from_wire(decode_base64_text(encoded))


class Category(IntEnum):
    """OpenTDB categories, valued by their numeric id. ANY means unfiltered."""
    ANY = 0
    GENERAL_KNOWLEDGE = 9
    BOOKS = 10
    FILMS = 11
    MUSIC = 12
    MUSICALS_AND_THEATRES = 13
    TELEVISION = 14
    VIDEO_GAMES = 15
    BOARD_GAMES = 16
    SCIENCE_AND_NATURE = 17
    COMPUTERS = 18
    MATHEMATICS = 19
    MYTHOLOGY = 20
    SPORTS = 21
    GEOGRAPHY = 22
    HISTORY = 23
    POLITICS = 24
    ART = 25
    CELEBRITIES = 26
    ANIMALS = 27
    VEHICLES = 28
    COMICS = 29
    GADGETS = 30
    ANIME_AND_MANGA = 31
    CARTOON_AND_ANIMATIONS = 32

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    def query_value(self) -> Optional[str]:
        if self is Category.ANY:
            return None
        return str(self.value)

    @classmethod
    def from_id(cls, category_id: int) -> Category:
        """Concrete category for an id in 9..32; ANY is not a valid id here."""
        if isinstance(category_id, bool) or not isinstance(category_id, int):
            raise ValueError(f"category id must be an integer, got {category_id!r}")
        if category_id == cls.ANY:
            raise ValueError("category id 0 is not a concrete category")
        try:
            return cls(category_id)
        except ValueError:
            raise ValueError(f"unknown category id: {category_id}") from None

    @classmethod
    def from_wire(cls, text: str) -> Category:
        """
        Match a display name as sent by the API, e.g. "Entertainment: Video Games".

        Spaces and any "Prefix:" part are dropped and "&" becomes "And" before
        the lookup; names that match nothing map to ANY.
        """
        return _BY_WIRE_NAME.get(normalize_category_name(text), cls.ANY)

    @classmethod
    def from_base64(cls, encoded: str) -> Category:
        return cls.from_wire(decode_base64_text(encoded))


def normalize_category_name(name: str) -> str:
    name = name.replace(" ", "")
    if ":" in name:
        name = name.rsplit(":", 1)[1]
    return name.replace("&", "And")


_DISPLAY_NAMES: Dict[Category, str] = {
    Category.ANY: "Any Category",
    Category.GENERAL_KNOWLEDGE: "General Knowledge",
    Category.BOOKS: "Entertainment: Books",
    Category.FILMS: "Entertainment: Film",
    Category.MUSIC: "Entertainment: Music",
    Category.MUSICALS_AND_THEATRES: "Entertainment: Musicals & Theatres",
    Category.TELEVISION: "Entertainment: Television",
    Category.VIDEO_GAMES: "Entertainment: Video Games",
    Category.BOARD_GAMES: "Entertainment: Board Games",
    Category.SCIENCE_AND_NATURE: "Science & Nature",
    Category.COMPUTERS: "Science: Computers",
    Category.MATHEMATICS: "Science: Mathematics",
    Category.MYTHOLOGY: "Mythology",
    Category.SPORTS: "Sports",
    Category.GEOGRAPHY: "Geography",
    Category.HISTORY: "History",
    Category.POLITICS: "Politics",
    Category.ART: "Art",
    Category.CELEBRITIES: "Celebrities",
    Category.ANIMALS: "Animals",
    Category.VEHICLES: "Vehicles",
    Category.COMICS: "Entertainment: Comics",
    Category.GADGETS: "Science: Gadgets",
    Category.ANIME_AND_MANGA: "Entertainment: Japanese Anime & Manga",
    Category.CARTOON_AND_ANIMATIONS: "Entertainment: Cartoon & Animations",
}

_BY_WIRE_NAME: Dict[str, Category] = {
    normalize_category_name(name): category
    for category, name in _DISPLAY_NAMES.items()
    if category is not Category.ANY
}
