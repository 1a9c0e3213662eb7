from fastapi import APIRouter, Depends

from quickcheck.api.deps import get_store, require_roles
from quickcheck.db.models import User
from quickcheck.db.store import Store
from quickcheck.schemas.dashboard import DashboardOverviewResponse
from quickcheck.services.dashboard_service import get_dashboard_overview

router = APIRouter()


@router.get("/overview")
def dashboard_overview(
    store: Store = Depends(get_store),
    _: User = Depends(require_roles("admin")),
):
    data = get_dashboard_overview(store)
    return {"data": DashboardOverviewResponse(**data)}
