import uuid


def prefixed_id(prefix: str):
    def factory() -> str:
        return f"{prefix}_{uuid.uuid4().hex[:16]}"

    return factory
