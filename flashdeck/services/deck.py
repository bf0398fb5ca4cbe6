from enum import Enum
from typing import Optional

from ..config import Settings


class Deck(str, Enum):
    GPT = "gpt"
    GEMINI = "gemini"


def resolve_deck(value: Optional[str]) -> Deck:
    # only the exact "gpt" selects the GPT deck; everything else is gemini
    if value == Deck.GPT.value:
        return Deck.GPT
    return Deck.GEMINI


def collection_name(deck: Deck, settings: Settings) -> str:
    if deck is Deck.GPT:
        return settings.gpt_collection
    return settings.gemini_collection
