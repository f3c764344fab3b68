"""
Unit tests for the Category, Difficulty and Kind wire mappings.
"""
import unittest

from otdb.models.options import Category, Difficulty, Kind, normalize_category_name
from tests.fixtures import encode_base64_text


class TestCategory(unittest.TestCase):
    """Category id and display name mappings."""

    def test_concrete_ids_round_trip_through_query_value(self):
        for category_id in range(9, 33):
            category = Category.from_id(category_id)
            self.assertEqual(category.query_value(), str(category_id))

    def test_any_renders_no_query_value(self):
        self.assertIsNone(Category.ANY.query_value())

    def test_from_id_rejects_ids_outside_range(self):
        for category_id in (0, 1, 8, 33, 100, -9):
            with self.assertRaises(ValueError):
                Category.from_id(category_id)

    def test_from_id_rejects_non_integers(self):
        with self.assertRaises(ValueError):
            Category.from_id("9")
        with self.assertRaises(ValueError):
            Category.from_id(True)

    def test_display_names_round_trip_through_base64_decoder(self):
        for category in Category:
            encoded = encode_base64_text(category.display_name)
            self.assertIs(Category.from_base64(encoded), category)

    def test_prefix_and_ampersand_are_normalized(self):
        self.assertEqual(normalize_category_name("Entertainment: Video Games"), "VideoGames")
        self.assertEqual(normalize_category_name("Science & Nature"), "ScienceAndNature")
        self.assertEqual(
            normalize_category_name("Entertainment: Japanese Anime & Manga"),
            "JapaneseAnimeAndManga",
        )

    def test_wire_names_match_variants(self):
        self.assertIs(Category.from_wire("Entertainment: Video Games"), Category.VIDEO_GAMES)
        self.assertIs(Category.from_wire("Science: Computers"), Category.COMPUTERS)
        self.assertIs(Category.from_wire("Science & Nature"), Category.SCIENCE_AND_NATURE)
        self.assertIs(Category.from_wire("Entertainment: Cartoon & Animations"), Category.CARTOON_AND_ANIMATIONS)

    def test_unknown_name_falls_back_to_any(self):
        self.assertIs(Category.from_wire("Entertainment: Podcasts"), Category.ANY)
        self.assertIs(Category.from_base64(encode_base64_text("")), Category.ANY)

    def test_invalid_base64_is_an_error(self):
        with self.assertRaises(ValueError):
            Category.from_base64("not base64!")


class TestDifficultyAndKind(unittest.TestCase):
    """Difficulty and Kind have no default for unknown wire values."""

    def test_difficulty_query_values(self):
        self.assertIsNone(Difficulty.ANY.query_value())
        self.assertEqual(Difficulty.EASY.query_value(), "easy")
        self.assertEqual(Difficulty.MEDIUM.query_value(), "medium")
        self.assertEqual(Difficulty.HARD.query_value(), "hard")

    def test_kind_query_values(self):
        self.assertIsNone(Kind.ANY.query_value())
        self.assertEqual(Kind.TRUE_OR_FALSE.query_value(), "boolean")
        self.assertEqual(Kind.MULTIPLE_CHOICE.query_value(), "multiple")

    def test_difficulty_from_base64(self):
        self.assertIs(Difficulty.from_base64(encode_base64_text("hard")), Difficulty.HARD)

    def test_kind_from_base64(self):
        self.assertIs(Kind.from_base64(encode_base64_text("boolean")), Kind.TRUE_OR_FALSE)

    def test_unknown_difficulty_is_an_error(self):
        with self.assertRaises(ValueError):
            Difficulty.from_wire("impossible")
        with self.assertRaises(ValueError):
            Difficulty.from_wire("any")

    def test_unknown_kind_is_an_error(self):
        with self.assertRaises(ValueError):
            Kind.from_base64(encode_base64_text("open"))


if __name__ == "__main__":
    unittest.main()
