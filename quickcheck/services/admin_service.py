import logging
import re

from quickcheck.db.models import CustomField, CustomFieldType, Host, User, UserRole
from quickcheck.db.store import Store

logger = logging.getLogger(__name__)


def list_users(store: Store) -> list[User]:
    return store.find(User, order_by=(User.created_at.asc(), User.id.asc()))


def create_user(store: Store, name: str, role: UserRole) -> User:
    user = store.insert(User(name=name.strip(), role=role))
    logger.info("user.created user_id=%s role=%s", user.id, user.role.value)
    return user


def list_hosts(store: Store) -> list[Host]:
    return store.find(Host, order_by=(Host.created_at.asc(), Host.id.asc()))


def create_host(store: Store, name: str, department: str = "") -> Host:
    return store.insert(Host(name=name.strip(), department=(department or "").strip()))


def field_name_from_label(label: str) -> str:
    return re.sub(r"\s+", "_", label.lower())


def list_custom_fields(store: Store) -> list[CustomField]:
    return store.find(CustomField, order_by=(CustomField.created_at.asc(), CustomField.id.asc()))


def create_custom_field(
    store: Store,
    label: str,
    name: str | None = None,
    field_type: CustomFieldType = CustomFieldType.text,
) -> CustomField:
    return store.insert(
        CustomField(
            label=label,
            name=name or field_name_from_label(label),
            type=field_type,
        )
    )
