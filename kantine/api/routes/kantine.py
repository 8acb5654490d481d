import logging
from typing import Optional

import httpx
from fastapi import APIRouter, Depends, Form, HTTPException, Query, Response
from pydantic import ValidationError

from kantine.domain.Blocks import SlackMessage
from kantine.domain.Command import ComposerMode
from kantine.infra.Image_Searcher import GoogleImageSearcher
from kantine.infra.Menu_Source import WorkplaceMenuSource
from kantine.infra.Slack_Webhook import post_message
from kantine.logic.commands.interpreter import interpret
from kantine.logic.message.composer import MenuMessageComposer
from kantine.logic.message.enricher import ImageEnricher
from kantine.utilities.constants import BAD_WEBHOOK_URL, NO_IMAGE_FOUND, RESPONSE_EPHEMERAL
from kantine.utilities.validators import WebhookTarget

router = APIRouter(prefix="/kantine")
logger = logging.getLogger(__name__)


# === Dependencies (overridden in tests) ===
def get_enricher() -> ImageEnricher:
    return ImageEnricher(GoogleImageSearcher())


def get_composer(enricher: ImageEnricher = Depends(get_enricher)) -> MenuMessageComposer:
    return MenuMessageComposer(WorkplaceMenuSource(), enricher)


# === Routes ===
@router.get("", response_model=SlackMessage, response_model_exclude_none=True)
async def get_menu(composer: MenuMessageComposer = Depends(get_composer)):
    """Today's menu as a Slack message."""
    return SlackMessage(blocks=await composer.compose(ComposerMode.SINGLE_DAY))


@router.get("/post-to-url", response_class=Response)
async def post_to_url(url: Optional[str] = Query(default=None),
                      composer: MenuMessageComposer = Depends(get_composer)):
    """Compose today's menu and push it to a Slack incoming webhook."""
    try:
        target = WebhookTarget(url=url or "")
    except ValidationError:
        raise HTTPException(status_code=400, detail=BAD_WEBHOOK_URL)

    message = SlackMessage(
        blocks=await composer.compose(ComposerMode.SINGLE_DAY),
        response_type=RESPONSE_EPHEMERAL,
    )
    try:
        body = await post_message(target.url, message)
    except httpx.HTTPError as e:
        logger.error("Webhook delivery failed: %s", e)
        raise HTTPException(status_code=502, detail="Could not deliver message to Slack")
    return Response(content=body, media_type="text/plain")


@router.post("/slack", response_model=SlackMessage, response_model_exclude_none=True)
async def slack_command(text: Optional[str] = Form(default=None),
                        composer: MenuMessageComposer = Depends(get_composer)):
    """Slack slash command endpoint: help, all/alt, announce, or today's menu."""
    command = interpret(text)
    logger.info("Slash command text=%r mode=%s announce=%s", text, command.mode.value, command.announce)
    return SlackMessage(
        blocks=await composer.compose(command.mode),
        response_type=command.response_type,
    )


@router.get("/image")
async def get_image(meal: str = Query(..., min_length=1),
                    enricher: ImageEnricher = Depends(get_enricher)):
    """Look up the image a dish would be shown with."""
    url = await enricher.find_image(meal)
    if url is None:
        raise HTTPException(status_code=404, detail=NO_IMAGE_FOUND)
    return {"meal": meal, "url": url}
