from fastapi import APIRouter

router = APIRouter(tags=["core"])

@router.get("/healthz")
def health_check() -> dict[str, str]:
    """Liveness probe for container orchestration.

    Does not touch the database.
    """
    return {"status": "ok"}
