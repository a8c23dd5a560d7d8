# mentorconnect/views/base.py
import asyncio
import logging
from typing import Any, Callable, Dict, Optional

from mentorconnect.config import settings

logger = logging.getLogger(__name__)


class ViewActionError(Exception):
    """An action that the mounted screen cannot perform in its current state."""


class BaseView:
    """
    A mounted screen. ``mount`` runs the initial fetch once; a view dropped
    by the workspace mid-fetch simply finishes into an orphaned object.
    """

    screen = None

    def __init__(self) -> None:
        self._mounted = False

    @property
    def mounted(self) -> bool:
        return self._mounted

    async def mount(self) -> None:
        if self._mounted:
            return
        self._mounted = True
        await self.on_mount()

    async def on_mount(self) -> None:
        pass

    def close(self) -> None:
        """Called when the workspace drops this view."""

    def to_payload(self) -> Dict[str, Any]:
        raise NotImplementedError


class ConfirmingView(BaseView):
    """A form that shows a confirmation, then hands control back after a delay."""

    def __init__(self, confirmation_delay: Optional[float] = None) -> None:
        super().__init__()
        self.confirmation_delay = (
            settings.CONFIRMATION_DELAY_SECONDS if confirmation_delay is None else confirmation_delay
        )
        self.loading = False
        self.success = False
        self.alert: Optional[str] = None
        self._timer: Optional[asyncio.TimerHandle] = None

    def _after_confirmation(self, callback: Callable[[], None]) -> None:
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self.confirmation_delay, callback)

    def close(self) -> None:
        # A dropped form never hands control back
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
