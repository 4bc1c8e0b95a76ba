"""URL shortening endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Path, status
from loguru import logger

from urlshortener.api import schemas
from urlshortener.api.dependencies import get_base_url, get_shortener_service
from urlshortener.services.shortener import ShortenedURLService
from urlshortener.services.exceptions import (
    ShortCodeGenerationError,
    URLNotFoundError,
    URLStorageError,
)

router = APIRouter(tags=["shortener"])
api_router = APIRouter(tags=["shortener"])


@router.post(
    "/shorten",
    response_model=schemas.URLResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        500: {"model": schemas.ErrorResponse, "description": "Storage failure"},
        503: {"model": schemas.ErrorResponse, "description": "No unique short code available"}
    }
)
async def create_short_url(
    url_data: schemas.URLCreateRequest,
    shortener_service: ShortenedURLService = Depends(get_shortener_service),
    base_url: str = Depends(get_base_url)
):
    """Shorten a URL. Submitting the same URL again returns the same code."""
    try:
        short_code = await shortener_service.shorten_url(url_data.url)
    except ShortCodeGenerationError as e:
        logger.error("Failed to shorten URL", error=str(e))
        raise HTTPException(status_code=503, detail="Could not allocate a short code, try again")
    except URLStorageError as e:
        logger.error("Failed to shorten URL", error=str(e))
        raise HTTPException(status_code=500, detail="Internal server error")

    return schemas.URLResponse(
        short_code=short_code,
        original_url=url_data.url,
        short_url=f"{base_url}/{short_code}",
    )


@api_router.get(
    "/urls/{short_code}",
    response_model=schemas.URLResponse,
    responses={
        404: {"model": schemas.ErrorResponse, "description": "URL not found"}
    }
)
async def get_url_info(
    short_code: str = Path(..., description="The short code of the URL"),
    shortener_service: ShortenedURLService = Depends(get_shortener_service),
    base_url: str = Depends(get_base_url)
):
    """Look up a short code without following the redirect."""
    try:
        original_url = await shortener_service.get_url(short_code)
    except URLNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except URLStorageError as e:
        logger.error("Failed to look up URL", short_code=short_code, error=str(e))
        raise HTTPException(status_code=500, detail="Internal server error")

    return schemas.URLResponse(
        short_code=short_code,
        original_url=original_url,
        short_url=f"{base_url}/{short_code}",
    )
