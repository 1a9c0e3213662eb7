from fastapi import APIRouter, Depends

from quickcheck.api.deps import get_store
from quickcheck.db.store import Store
from quickcheck.schemas.review import ReviewCreate, ReviewOut
from quickcheck.services.review_service import create_review

router = APIRouter()


@router.post("")
def submit_review(payload: ReviewCreate, store: Store = Depends(get_store)):
    # Reached from the emailed review link, so no staff token is required.
    review = create_review(store, payload.visit_id, payload.rating, payload.comment)
    return {"data": ReviewOut.model_validate(review)}
