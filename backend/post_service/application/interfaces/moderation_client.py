"""Port for external content-safety checks."""

from abc import ABC, abstractmethod


class ModerationClient(ABC):
    """Asks a moderation provider whether a piece of text is unsafe."""

    @abstractmethod
    async def check_safety(self, text: str) -> bool:
        """Return ``True`` when the provider flags ``text``.

        Raises:
            ModerationError: the provider reported an error.
        """
        ...
