"""
Zero Waste Chef Vote Endpoints
One like or dislike per user per recipe
"""

from fastapi import APIRouter, HTTPException, status

from core.dependencies import DbSession, CurrentIdentity
from schemas.auth_schemas import MessageResponse
from schemas.recipe_schemas import VoteRequest, VoteStatus, VoteCounts
from services import community_service
from services.exceptions import NotFoundError

router = APIRouter()


@router.post("/likes", response_model=MessageResponse)
async def vote(vote_request: VoteRequest, identity: CurrentIdentity, db: DbSession):
    """Record or change the caller's vote on a recipe"""
    try:
        await community_service.record_vote(db, identity.id, vote_request.recipe_id, vote_request.is_like)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

    return MessageResponse(message="Vote recorded")


# Registered before /likes/{recipe_id} so "count" is never parsed as an id
@router.get("/likes/count/{recipe_id}", response_model=VoteCounts)
async def get_vote_counts(recipe_id: int, db: DbSession):
    return VoteCounts(**await community_service.count_votes(db, recipe_id))


@router.get("/likes/{recipe_id}", response_model=VoteStatus)
async def get_vote(recipe_id: int, identity: CurrentIdentity, db: DbSession):
    """The caller's vote: true, false, or null when they have not voted"""
    return VoteStatus(liked=await community_service.get_vote(db, identity.id, recipe_id))
