from fastapi import APIRouter

from wolfram_query.models.wolfram import QueryOutcome
from wolfram_query.services import wolfram as wolfram_service

router = APIRouter(prefix="/api/wolfram", tags=["wolfram"])


@router.get("/query")
def query(input: str) -> QueryOutcome:
    return wolfram_service.query(input)
