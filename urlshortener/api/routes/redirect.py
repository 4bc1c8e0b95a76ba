"""URL redirection endpoint."""

from fastapi import APIRouter, Depends, HTTPException, status
from starlette.responses import RedirectResponse
from loguru import logger

from urlshortener.api.dependencies import get_shortener_service
from urlshortener.services.shortener import ShortenedURLService
from urlshortener.services.exceptions import URLNotFoundError, URLStorageError

# Create router with tags
router = APIRouter(tags=["redirect"])


@router.get(
    "/{short_code}",
    response_class=RedirectResponse,
    status_code=status.HTTP_301_MOVED_PERMANENTLY
)
async def redirect_to_original_url(
    short_code: str,
    shortener_service: ShortenedURLService = Depends(get_shortener_service),
):
    """Redirect to the original URL."""
    try:
        original_url = await shortener_service.get_url(short_code)
    except URLNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except URLStorageError as e:
        logger.error("Redirect failed", short_code=short_code, error=str(e))
        raise HTTPException(status_code=500, detail="Internal server error")

    return RedirectResponse(url=original_url, status_code=status.HTTP_301_MOVED_PERMANENTLY)
