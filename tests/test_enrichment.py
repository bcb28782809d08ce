"""Unit tests for app.services.enrichment: ordered keyword rules and source preservation."""

import unittest
from types import SimpleNamespace

from app.services.enrichment import (
    DEFAULT_CLASSIFICATION,
    RULES,
    Classification,
    classify,
    enrich,
)


def _prompt(input_text: str | None, source: str | None = None, category: str | None = None):
    return SimpleNamespace(input_text=input_text, source=source, category=category)


class TestClassifyExamples(unittest.TestCase):
    """One representative sentence per category."""

    def test_coding(self) -> None:
        self.assertEqual(
            classify("Can you help me debug this code?"), ("Coding", "User")
        )

    def test_writing(self) -> None:
        self.assertEqual(classify("Write a poem about autumn"), ("Writing", "User"))

    def test_math(self) -> None:
        self.assertEqual(
            classify("Calculate the derivative of x^2"), ("Math", "User")
        )

    def test_ai_analytics(self) -> None:
        self.assertEqual(
            classify("Please analyze this dataset with ML"), ("AI/Analytics", "System")
        )

    def test_general(self) -> None:
        self.assertEqual(classify("What's the weather like?"), ("General", "User"))


class TestRuleOrder(unittest.TestCase):
    """First matching rule wins."""

    def test_coding_beats_math(self) -> None:
        self.assertEqual(classify("Solve this math problem in python").category, "Coding")

    def test_writing_beats_ai(self) -> None:
        self.assertEqual(classify("Write an essay on AI ethics").category, "Writing")

    def test_rule_order_is_coding_writing_math_ai(self) -> None:
        self.assertEqual(
            [rule.result.category for rule in RULES],
            ["Coding", "Writing", "Math", "AI/Analytics"],
        )


class TestWholeWordMatching(unittest.TestCase):
    """Keywords only match as whole words."""

    def test_longer_word_does_not_match(self) -> None:
        self.assertEqual(classify("The coder went home"), DEFAULT_CLASSIFICATION)
        self.assertEqual(classify("Mathematics is fun"), DEFAULT_CLASSIFICATION)

    def test_keyword_inside_word_does_not_match(self) -> None:
        # "ai" in "said", "ml" in "html"
        self.assertEqual(classify("She said hello"), DEFAULT_CLASSIFICATION)

    def test_punctuation_is_a_boundary(self) -> None:
        self.assertEqual(classify("(code)").category, "Coding")
        self.assertEqual(classify("poem, please").category, "Writing")

    def test_symbol_language_names(self) -> None:
        self.assertEqual(classify("Explain c# generics").category, "Coding")
        self.assertEqual(classify("Is c++ hard?").category, "Coding")

    def test_case_insensitive(self) -> None:
        self.assertEqual(classify("PYTHON tips").category, "Coding")
        self.assertEqual(classify("Statistics homework").source, "System")


class TestClassifyEdgeCases(unittest.TestCase):
    """Empty or missing text falls through to the default."""

    def test_empty_and_blank(self) -> None:
        self.assertEqual(classify(""), DEFAULT_CLASSIFICATION)
        self.assertEqual(classify("   \n\t"), DEFAULT_CLASSIFICATION)

    def test_none(self) -> None:
        self.assertEqual(classify(None), DEFAULT_CLASSIFICATION)

    def test_idempotent(self) -> None:
        text = "Train a model on this data"
        self.assertEqual(classify(text), classify(text))

    def test_returns_classification(self) -> None:
        result = classify("fix this bug")
        self.assertIsInstance(result, Classification)
        self.assertEqual(result.category, "Coding")
        self.assertEqual(result.source, "User")


class TestEnrich(unittest.TestCase):
    """enrich sets category always and source only when absent."""

    def test_fills_both_when_absent(self) -> None:
        prompt = enrich(_prompt("Please analyze this dataset"))
        self.assertEqual(prompt.category, "AI/Analytics")
        self.assertEqual(prompt.source, "System")

    def test_preserves_caller_source(self) -> None:
        prompt = enrich(_prompt("Please analyze this dataset", source="Import"))
        self.assertEqual(prompt.category, "AI/Analytics")
        self.assertEqual(prompt.source, "Import")

    def test_blank_source_counts_as_absent(self) -> None:
        prompt = enrich(_prompt("fix this bug", source="  "))
        self.assertEqual(prompt.source, "User")

    def test_overwrites_existing_category(self) -> None:
        prompt = enrich(_prompt("Write a story", category="Math"))
        self.assertEqual(prompt.category, "Writing")


if __name__ == "__main__":
    unittest.main()
