import logging
import random
from typing import Any

from fastapi import HTTPException, status
from pymongo import ASCENDING
from pymongo.database import Database
from pymongo.errors import PyMongoError

from ..config import Settings
from .deck import Deck, collection_name

logger = logging.getLogger(__name__)

Card = dict[str, Any]

ID_FIELD = "_id"
BY_ID = [(ID_FIELD, ASCENDING)]


def decorate(card: Card, deck: Deck) -> Card:
    card["deck"] = deck.value
    return card


def random_card(db: Database, deck: Deck, rng: random.Random, settings: Settings) -> Card:
    name = collection_name(deck, settings)
    collection = db[name]

    try:
        count = collection.count_documents({})
    except PyMongoError:
        logger.exception("count failed on %s", name)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to count documents")

    if count == 0:
        logger.info("random card requested from empty collection %s", name)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No cards found in deck")

    # natural order: the store may reorder between count and fetch
    skip = rng.randrange(count)

    try:
        card = collection.find_one({}, skip=skip)
    except PyMongoError:
        logger.exception("fetch at offset %d failed on %s", skip, name)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch card")

    if card is None:
        # a document vanished after the count
        logger.warning("no document at offset %d of %d in %s", skip, count, name)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch card")

    return decorate(card, deck)


def next_card(db: Database, deck: Deck, current_id: int, settings: Settings) -> Card:
    """Return the card after ``current_id`` in ascending id order.

    Past the last card this wraps to the first one. The two lookups are
    not isolated from each other, so a write landing between them is
    visible to the fallback.
    """
    name = collection_name(deck, settings)
    collection = db[name]

    try:
        card = collection.find_one({ID_FIELD: {"$gt": current_id}}, sort=BY_ID)
    except PyMongoError:
        logger.exception("next lookup after %d failed on %s", current_id, name)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch card")

    if card is None:
        try:
            card = collection.find_one({}, sort=BY_ID)
        except PyMongoError:
            logger.exception("wrap-around lookup failed on %s", name)
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch card")

        if card is None:
            logger.info("next card requested from empty collection %s", name)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No next card found")

    return decorate(card, deck)
