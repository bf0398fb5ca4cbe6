import logging
import random
import re
from typing import Optional

from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pymongo.database import Database

from ..config import Settings
from ..database import get_db
from .. import schemas
from ..services.cards import Card, next_card, random_card
from ..services.deck import resolve_deck

logger = logging.getLogger(__name__)

router = APIRouter(tags=["cards"])

INT_RE = re.compile(r"[+-]?[0-9]+")
# ids are stored as BSON int64
INT64_MIN, INT64_MAX = -2**63, 2**63 - 1

ERRORS = {
    404: {"model": schemas.ErrorOut},
    500: {"model": schemas.ErrorOut},
}


def get_rng(request: Request) -> random.Random:
    return request.app.state.rng


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def parse_current_id(current_id: Optional[str] = Query(default=None)) -> int:
    if not current_id:
        logger.info("rejected /next: missing current_id")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="current_id is required")
    if not INT_RE.fullmatch(current_id) or not INT64_MIN <= int(current_id) <= INT64_MAX:
        logger.info("rejected /next: current_id=%r is not a 64-bit integer", current_id)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid current_id format, expected integer",
        )
    return int(current_id)


def card_response(card: Card) -> JSONResponse:
    # ObjectId ids have no JSON form of their own
    return JSONResponse(content=jsonable_encoder(card, custom_encoder={ObjectId: str}))


@router.get("/random", responses=ERRORS)
def get_random_card(
    deck: str = "",
    db: Database = Depends(get_db),
    rng: random.Random = Depends(get_rng),
    settings: Settings = Depends(get_app_settings),
):
    card = random_card(db, resolve_deck(deck), rng, settings)
    return card_response(card)


@router.get("/next", responses={400: {"model": schemas.ErrorOut}, **ERRORS})
def get_next_card(
    deck: str = "",
    current_id: int = Depends(parse_current_id),
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    card = next_card(db, resolve_deck(deck), current_id, settings)
    return card_response(card)
