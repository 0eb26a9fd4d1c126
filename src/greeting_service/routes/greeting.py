import logging

from fastapi import APIRouter

from ..models import HelloResponse, MvengResponse

router = APIRouter(tags=["greeting"])

logger = logging.getLogger(__name__)

HELLO = {"message": "Hello, World!", "status": "success"}
MVENG = {
    "greeting": "🌍 Akwaaba! Welcome, friend!",
    "wisdom": (
        "Nkukuma nkobe ye, a si nkukuma nda - "
        "The storyteller is like a tree, rooted in wisdom"
    ),
    "from": "Mveng, your African storyteller",
}


@router.get("/hello", response_model=HelloResponse)
async def hello() -> HelloResponse:
    """Say hello."""
    logger.debug("GET /hello")
    return HelloResponse(**HELLO)


@router.get("/mveng", response_model=MvengResponse)
async def mveng() -> MvengResponse:
    """Greeting and a proverb from Mveng, the storyteller."""
    logger.debug("GET /mveng")
    return MvengResponse(**MVENG)
