"""Article parsing endpoint."""

import logging

from fastapi import APIRouter, Depends

from referent.dependencies import get_article_service
from referent.exceptions import ActionError
from referent.messages import message
from referent.models import ErrorResponse, ParsedArticle, ParseRequest
from referent.services import ArticleService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["articles"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.post("/parse", response_model=ParsedArticle)
async def parse_article(
    body: ParseRequest,
    service: ArticleService = Depends(get_article_service),
) -> ParsedArticle:
    """Download the page at ``url`` and return its title, date and content."""
    try:
        return await service.parse(body.url, body.language)
    except ActionError:
        raise
    except Exception as e:
        logger.exception(f"Parse error for {body.url!r}")
        raise ActionError("PARSE_ERROR", message("parse_failed", body.language), 500) from e
