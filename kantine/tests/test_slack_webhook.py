import json

import httpx
import pytest

from kantine.domain.Blocks import SlackMessage
from kantine.infra.Slack_Webhook import post_message
from kantine.logic.message.blocks import attachment_block, text_block

WEBHOOK = "https://hooks.slack.com/services/T000/B000/XXXX"


@pytest.mark.asyncio
async def test_posts_message_without_null_fields():
    received = {}

    def handler(request):
        received["url"] = str(request.url)
        received["body"] = json.loads(request.content)
        return httpx.Response(200, text="ok")

    message = SlackMessage(
        blocks=text_block("Menu for today") + [attachment_block("Taco")],
        response_type="ephemeral",
    )
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

    body = await post_message(WEBHOOK, message, client=client)

    assert body == "ok"
    assert received["url"] == WEBHOOK
    assert received["body"]["response_type"] == "ephemeral"
    assert received["body"]["blocks"][1] == {
        "type": "section", "text": {"type": "mrkdwn", "text": "*Taco*"},
    }


@pytest.mark.asyncio
async def test_transport_error_propagates():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    with pytest.raises(httpx.HTTPError):
        await post_message(WEBHOOK, SlackMessage(blocks=text_block("x")), client=client)
