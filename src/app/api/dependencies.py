"""Request dependencies shared by every API router."""
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.app.containers import Container
from src.app.logging import get_logger
from src.shared.database.database import Database
from src.shared.exceptions import StoreUnavailable

logger = get_logger(__name__)


@inject
async def require_store_connection(
    db: Database = Depends(Provide[Container.database]),
) -> None:
    """Reject the request right away when the database connection was never established."""
    if not db.is_connected:
        logger.error("Rejecting request: database not connected")
        raise StoreUnavailable()
