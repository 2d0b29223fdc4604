from fastapi import Request
import logging

from medportal.db.store import EntityStore

logger = logging.getLogger(__name__)


# Store dependency for FastAPI routes
def get_store(request: Request) -> EntityStore:
    """
    Return the entity store created at startup.
    This will be used as a FastAPI dependency
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        logger.error("Entity store accessed before application startup.")
        raise RuntimeError("Entity store not initialized.")
    return store
