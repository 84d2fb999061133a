"""
API endpoints for job openings.

Each route is a straight pipeline: read input, validate, map, call the
repository, wrap the result in the success envelope. Failures are raised as
HTTPException and rendered by the error envelope handlers.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from app.api.responses import send_success
from app.core.deps import get_opening_id, get_opening_repository
from app.core.exceptions import OpeningValidationError
from app.core.validators import validate_opening_request
from app.crud.opening import OpeningRepository
from app.models.opening import Opening
from app.schemas.opening import (
    ErrorEnvelope,
    OpeningEnvelope,
    OpeningListEnvelope,
    OpeningRequest,
    OpeningResponse,
)

router = APIRouter(tags=["Openings"])
logger = logging.getLogger(__name__)

# Largest value a 64-bit INTEGER primary key can hold
MAX_ID = 2 ** 63 - 1

ERROR_RESPONSES = {
    400: {"model": ErrorEnvelope},
    404: {"model": ErrorEnvelope},
    500: {"model": ErrorEnvelope},
}


def find_opening(repo: OpeningRepository, opening_id: str) -> Opening:
    """
    Load an opening by the raw id query value.

    Raises:
        HTTPException 404: If the id does not match any row
        HTTPException 500: If the lookup itself fails
    """
    not_found = HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"opening with id {opening_id} not found"
    )

    # Only plain ASCII digits name a row; int() would also take "+1" or "0_1"
    if not (opening_id.isascii() and opening_id.isdigit()):
        raise not_found
    numeric_id = int(opening_id)
    if not 0 < numeric_id <= MAX_ID:
        raise not_found

    try:
        opening = repo.get_by_id(numeric_id)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching opening {opening_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"error while fetching opening with id {opening_id} on database"
        )

    if opening is None:
        raise not_found

    return opening


def check_request(request: Optional[OpeningRequest]) -> OpeningRequest:
    """Run the validator and translate its failure into a 400."""
    try:
        validate_opening_request(request)
    except OpeningValidationError as e:
        logger.warning(f"validation error: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return request


@router.get("/opening", response_model=OpeningEnvelope, responses=ERROR_RESPONSES)
def show_opening(
    opening_id: str = Depends(get_opening_id),
    repo: OpeningRepository = Depends(get_opening_repository)
):
    """
    Retrieve a single opening by ``?id=``.
    """
    opening = find_opening(repo, opening_id)

    return send_success("show-opening", OpeningResponse.model_validate(opening))


@router.post("/opening", response_model=OpeningEnvelope, responses=ERROR_RESPONSES)
def create_opening(
    request: Optional[OpeningRequest] = Body(None),
    repo: OpeningRepository = Depends(get_opening_repository)
):
    """
    Create a new opening.

    role, company, location and remote are required; link and salary are
    optional. Any id in the body is ignored, the store assigns one.
    """
    request = check_request(request)

    try:
        opening = repo.create(request)
    except SQLAlchemyError as e:
        logger.error(f"error creating opening: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="error while creating opening on database"
        )

    logger.info(f"Created opening {opening.id}: {opening.role} at {opening.company}")
    return send_success("create-opening", OpeningResponse.model_validate(opening))


@router.delete("/opening", response_model=OpeningEnvelope, responses=ERROR_RESPONSES)
def delete_opening(
    opening_id: str = Depends(get_opening_id),
    repo: OpeningRepository = Depends(get_opening_repository)
):
    """
    Hard-delete an opening and return its last known data.
    """
    opening = find_opening(repo, opening_id)

    # Snapshot before the row goes away; the instance is unusable after commit
    deleted = OpeningResponse.model_validate(opening)

    try:
        repo.delete(opening)
    except SQLAlchemyError as e:
        logger.error(f"error deleting opening {opening_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"error while deleting opening with id {opening_id} on database"
        )

    logger.info(f"Deleted opening {opening_id}")
    return send_success("delete-opening", deleted)


@router.put("/opening", response_model=OpeningEnvelope, responses=ERROR_RESPONSES)
def update_opening(
    opening_id: str = Depends(get_opening_id),
    request: Optional[OpeningRequest] = Body(None),
    repo: OpeningRepository = Depends(get_opening_repository)
):
    """
    Replace every mutable field of an existing opening.

    The body has the same shape and rules as create; this is a full replace,
    not a partial update.
    """
    opening = find_opening(repo, opening_id)
    request = check_request(request)

    try:
        opening = repo.update(opening, request)
    except SQLAlchemyError as e:
        logger.error(f"error updating opening {opening_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"error while updating opening with id {opening_id} on database"
        )

    logger.info(f"Updated opening {opening.id}")
    return send_success("update-opening", OpeningResponse.model_validate(opening))


@router.get("/openings", response_model=OpeningListEnvelope, responses={500: {"model": ErrorEnvelope}})
def list_openings(repo: OpeningRepository = Depends(get_opening_repository)):
    """
    List every opening. An empty store yields an empty list.
    """
    try:
        openings = repo.list()
    except SQLAlchemyError as e:
        logger.error(f"error listing openings: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="error while listing openings on database"
        )

    return send_success("list-openings", [OpeningResponse.model_validate(o) for o in openings])
