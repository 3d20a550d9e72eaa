import asyncio

from fastapi import APIRouter, Depends, HTTPException

from src.config.settings import Settings, get_settings
from src.models import (
    ChangeSetError,
    InitialCommitError,
    MalformedPathError,
    RevisionNotFoundError,
)
from src.schemas import ChangeSetRequest, ChangeSetResult
from src.services import ChangeSetResolver, create_resolver_from_settings

router = APIRouter(prefix="/changeset", tags=["changeset"])


def get_resolver(settings: Settings = Depends(get_settings)):
    """Build a resolver for the configured repository, closing it after the request."""
    resolver = create_resolver_from_settings(settings)
    try:
        yield resolver
    finally:
        resolver.diff_provider.close()


@router.post("/resolve", response_model=ChangeSetResult)
async def resolve_changeset(
    request: ChangeSetRequest,
    resolver: ChangeSetResolver = Depends(get_resolver),
    settings: Settings = Depends(get_settings),
):
    """Resolve the modules touched between two revisions."""
    if not request.new_rev.strip():
        raise HTTPException(status_code=400, detail="new_rev cannot be empty")

    try:
        return await asyncio.wait_for(
            asyncio.to_thread(
                resolver.resolve,
                request.old_rev,
                request.new_rev,
                request.path_filter,
            ),
            timeout=float(settings.RESOLVE_TIMEOUT),
        )
    except asyncio.TimeoutError:
        raise HTTPException(
            status_code=408,
            detail=f"Resolve timed out after {settings.RESOLVE_TIMEOUT} seconds",
        )
    except RevisionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (MalformedPathError, InitialCommitError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ChangeSetError as e:
        raise HTTPException(status_code=500, detail=f"Resolve failed: {str(e)}")


@router.get("/health")
async def changeset_health_check():
    """Simple health check for changeset endpoints."""
    return {"status": "changeset endpoints available"}
