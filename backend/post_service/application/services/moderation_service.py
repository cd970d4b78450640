"""Application service wrapping the moderation port."""

import logging

from post_service.application.interfaces import ModerationClient

logger = logging.getLogger(__name__)


class ModerationService:
    """Standalone safety check. Post creation and update do not call it."""

    def __init__(self, client: ModerationClient):
        self._client = client

    async def is_flagged(self, text: str) -> bool:
        flagged = await self._client.check_safety(text)
        if flagged:
            logger.info("Moderation flagged submitted text (%d chars)", len(text))
        return flagged
