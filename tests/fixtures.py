"""
Canned OpenTDB payloads for the tests.
"""
import base64
import json
from typing import Any, Dict, List


def encode_base64_text(value: str) -> str:
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


class WirePayloads:
    """Bodies shaped like the real API answers."""

    @staticmethod
    def trivia_item(
        *,
        category: str = "Entertainment: Video Games",
        kind: str = "multiple",
        difficulty: str = "medium",
        question: str = "Which company developed \"Half-Life\"?",
        correct_answer: str = "Valve",
        incorrect_answers: List[str] = None,
    ) -> Dict[str, Any]:
        if incorrect_answers is None:
            incorrect_answers = ["Blizzard", "Bungie", "id Software"]
        return {
            "type": encode_base64_text(kind),
            "difficulty": encode_base64_text(difficulty),
            "category": encode_base64_text(category),
            "question": encode_base64_text(question),
            "correct_answer": encode_base64_text(correct_answer),
            "incorrect_answers": [encode_base64_text(a) for a in incorrect_answers],
        }

    @classmethod
    def trivia_body(cls, response_code: int = 0, items: List[Dict[str, Any]] = None) -> str:
        if items is None:
            items = [
                cls.trivia_item(),
                cls.trivia_item(
                    category="Science & Nature",
                    kind="boolean",
                    difficulty="easy",
                    question="The Sun is a star.",
                    correct_answer="True",
                    incorrect_answers=["False"],
                ),
            ]
        return json.dumps({"response_code": response_code, "results": items})

    @staticmethod
    def global_detail(total: int, pending: int, verified: int, rejected: int) -> Dict[str, int]:
        return {
            "total_num_of_questions": total,
            "total_num_of_pending_questions": pending,
            "total_num_of_verified_questions": verified,
            "total_num_of_rejected_questions": rejected,
        }

    @classmethod
    def global_body(cls, categories: Dict[str, Dict[str, int]] = None) -> str:
        if categories is None:
            categories = {
                "9": cls.global_detail(400, 20, 350, 30),
                "18": cls.global_detail(200, 5, 180, 15),
            }
        return json.dumps({
            "overall": cls.global_detail(600, 25, 530, 45),
            "categories": categories,
        })

    @staticmethod
    def category_body(category_id: int = 18) -> str:
        return json.dumps({
            "category_id": category_id,
            "category_question_count": {
                "total_question_count": 200,
                "total_easy_question_count": 60,
                "total_medium_question_count": 90,
                "total_hard_question_count": 50,
            },
        })

    @staticmethod
    def token_body(token: str = "f00dcafe") -> str:
        return json.dumps({
            "response_code": 0,
            "response_message": "Token Generated Successfully!",
            "token": token,
        })

    @staticmethod
    def reset_body(token: str) -> str:
        return json.dumps({"response_code": 0, "token": token})
