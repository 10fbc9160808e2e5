"""Protocol for notification channels used after a successful booking."""
from typing import Protocol


class TextNotifier(Protocol):
    async def send_text(self, message: str) -> bool:
        """Send message; True if delivered to the channel. Never raises."""
        ...
