import logging
from typing import Optional

import httpx

from kantine.domain.Blocks import SlackMessage
from kantine.utilities.config import HTTP_TIMEOUT

logger = logging.getLogger(__name__)


async def post_message(url: str, message: SlackMessage, client: Optional[httpx.AsyncClient] = None) -> str:
    """POST ``message`` to a Slack incoming webhook and return the response body.

    The URL must already be validated (see utilities.validators.WebhookTarget).
    Transport errors propagate as httpx.HTTPError.
    """
    payload = message.model_dump(exclude_none=True)
    if client is not None:
        response = await client.post(url, json=payload)
    else:
        async with httpx.AsyncClient(timeout=HTTP_TIMEOUT) as client:
            response = await client.post(url, json=payload)
    logger.info("Posted %d blocks to webhook, status=%s", len(message.blocks), response.status_code)
    return response.text
