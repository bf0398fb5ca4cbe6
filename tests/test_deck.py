import pytest

from flashdeck.config import Settings
from flashdeck.services.deck import Deck, collection_name, resolve_deck


def test_gpt_resolves_to_gpt():
    assert resolve_deck("gpt") is Deck.GPT


@pytest.mark.parametrize("value", [None, "", "gemini", "GPT", " gpt", "gpt ", "claude", "gpt4"])
def test_everything_else_is_gemini(value):
    assert resolve_deck(value) is Deck.GEMINI


def test_collection_names_follow_settings():
    s = Settings(gpt_collection="A", gemini_collection="B")
    assert collection_name(Deck.GPT, s) == "A"
    assert collection_name(Deck.GEMINI, s) == "B"


def test_default_collections():
    s = Settings()
    assert collection_name(Deck.GPT, s) == "GptQuestions"
    assert collection_name(Deck.GEMINI, s) == "GeminiQuestions"
