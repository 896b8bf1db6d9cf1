import httpx

API_BASE = "https://discord.com/api/v9"


class SendError(RuntimeError):
    """Posting the message to Discord failed."""


def messages_url(channel_id):
    return f"{API_BASE}/channels/{channel_id}/messages"


async def send_message(token, channel_id, content, client=None):
    """POST a plain-text message to a channel. Any non-2xx status raises SendError."""
    headers = {"Authorization": token, "Content-Type": "application/json"}
    body = {"content": content, "tts": False}

    try:
        if client is None:
            async with httpx.AsyncClient() as c:
                r = await c.post(messages_url(channel_id), headers=headers, json=body)
        else:
            r = await client.post(messages_url(channel_id), headers=headers, json=body)
        r.raise_for_status()
    except httpx.HTTPError as e:
        raise SendError(f"Failed to send message: {e}") from e

    print(f"  [discord] sent {len(content)} chars to channel {channel_id}")
