from fastapi import APIRouter, Depends

from quickcheck.api.deps import get_current_user, get_store, require_roles
from quickcheck.db.models import User
from quickcheck.db.store import Store
from quickcheck.schemas.admin import (
    CustomFieldCreate,
    CustomFieldOut,
    HostCreate,
    HostOut,
    NotificationSettingsPayload,
    ReviewRequestOut,
    UserCreate,
)
from quickcheck.schemas.auth import UserOut
from quickcheck.services.admin_service import (
    create_custom_field,
    create_host,
    create_user,
    list_custom_fields,
    list_hosts,
    list_users,
)
from quickcheck.services.review_service import list_review_requests
from quickcheck.services.settings_service import get_notification_settings, update_notification_settings

router = APIRouter()


@router.get("/users")
def admin_list_users(
    store: Store = Depends(get_store),
    _: User = Depends(require_roles("admin")),
):
    return {"data": [UserOut.model_validate(row) for row in list_users(store)]}


@router.post("/users")
def admin_create_user(
    payload: UserCreate,
    store: Store = Depends(get_store),
    _: User = Depends(require_roles("admin")),
):
    return {"data": UserOut.model_validate(create_user(store, payload.name, payload.role))}


@router.get("/hosts")
def admin_list_hosts(
    store: Store = Depends(get_store),
    _: User = Depends(get_current_user),
):
    # Guards need the host list for the check-in picker.
    return {"data": [HostOut.model_validate(row) for row in list_hosts(store)]}


@router.post("/hosts")
def admin_create_host(
    payload: HostCreate,
    store: Store = Depends(get_store),
    _: User = Depends(require_roles("admin")),
):
    return {"data": HostOut.model_validate(create_host(store, payload.name, payload.department))}


@router.get("/custom-fields")
def admin_list_custom_fields(
    store: Store = Depends(get_store),
    _: User = Depends(get_current_user),
):
    return {"data": [CustomFieldOut.model_validate(row) for row in list_custom_fields(store)]}


@router.post("/custom-fields")
def admin_create_custom_field(
    payload: CustomFieldCreate,
    store: Store = Depends(get_store),
    _: User = Depends(require_roles("admin")),
):
    row = create_custom_field(store, payload.label, name=payload.name, field_type=payload.type)
    return {"data": CustomFieldOut.model_validate(row)}


@router.get("/notification-settings")
def admin_get_notification_settings(
    store: Store = Depends(get_store),
    _: User = Depends(require_roles("admin")),
):
    return {"data": get_notification_settings(store)}


@router.put("/notification-settings")
def admin_update_notification_settings(
    payload: NotificationSettingsPayload,
    store: Store = Depends(get_store),
    _: User = Depends(require_roles("admin")),
):
    data = update_notification_settings(
        store,
        auto_send_on_checkout=payload.auto_send_on_checkout,
        email_template=payload.email_template,
        sms_template=payload.sms_template,
    )
    return {"data": data}


@router.get("/review-requests")
def admin_list_review_requests(
    store: Store = Depends(get_store),
    _: User = Depends(require_roles("admin")),
):
    return {"data": [ReviewRequestOut.model_validate(row) for row in list_review_requests(store)]}
