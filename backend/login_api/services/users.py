"""
User lookups against the document store.

One query, the raw document back; errors propagate to the caller.
"""

from typing import Any, Optional

from loguru import logger


class LoadUserByEmailRepository:
    def __init__(self, user_model) -> None:
        # any collection-like object with an awaitable find_one()
        self.user_model = user_model

    async def load(self, email: str) -> Optional[dict[str, Any]]:
        """
        Return the user document whose ``email`` equals *email*, else None.
        """
        user = await self.user_model.find_one({"email": email})
        logger.debug("load user by email | email={} found={}", email, user is not None)
        return user
