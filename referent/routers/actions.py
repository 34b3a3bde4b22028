"""Generation endpoints: summary, theses, Telegram post, translation, illustration."""

import logging

from fastapi import APIRouter, Depends

from referent.dependencies import get_orchestrator
from referent.exceptions import ActionError
from referent.models import ActionKind, ActionRequest, ErrorResponse
from referent.orchestrator import ArticleOrchestrator, unexpected_failure

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["actions"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


async def run_action(
    action: ActionKind, body: ActionRequest, orchestrator: ArticleOrchestrator
) -> dict[str, str]:
    try:
        result = await orchestrator.generate(action, body)
    except ActionError:
        raise
    except Exception as e:
        logger.exception(f"{action.value} generation error")
        raise unexpected_failure(action, body.language) from e
    return result.payload()


@router.post("/summary")
async def summary(body: ActionRequest, orchestrator: ArticleOrchestrator = Depends(get_orchestrator)):
    """Two or three sentence description of the article."""
    return await run_action(ActionKind.SUMMARY, body, orchestrator)


@router.post("/theses")
async def theses(body: ActionRequest, orchestrator: ArticleOrchestrator = Depends(get_orchestrator)):
    """Five to eight bullet-point theses."""
    return await run_action(ActionKind.THESES, body, orchestrator)


@router.post("/telegram")
async def telegram_post(body: ActionRequest, orchestrator: ArticleOrchestrator = Depends(get_orchestrator)):
    """Ready-to-publish Telegram post ending with the source link."""
    return await run_action(ActionKind.TELEGRAM, body, orchestrator)


@router.post("/translate")
async def translate(body: ActionRequest, orchestrator: ArticleOrchestrator = Depends(get_orchestrator)):
    """Full article translated into the target language."""
    return await run_action(ActionKind.TRANSLATE, body, orchestrator)


@router.post("/illustration")
async def illustration(body: ActionRequest, orchestrator: ArticleOrchestrator = Depends(get_orchestrator)):
    """AI-generated illustration returned as a data URL."""
    return await run_action(ActionKind.ILLUSTRATION, body, orchestrator)


@router.post("/generate/{action}")
async def generate(
    action: ActionKind,
    body: ActionRequest,
    orchestrator: ArticleOrchestrator = Depends(get_orchestrator),
):
    return await run_action(action, body, orchestrator)
