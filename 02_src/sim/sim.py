"""SIM implementation - scripted onboarding flow standing in for the embedded module."""

import asyncio
import random
import time
from typing import Any, Protocol

import httpx

from ux_host.config import CHANNEL_EVENTS, METHOD_ON_KYC_EVENT
from ux_host.logging_config import get_logger

logger = get_logger(__name__)


# Scripted onboarding flow, in emission order
SCENARIO: list[dict[str, Any]] = [
    {"type": "flowStarted", "message": "Onboarding started"},
    {"type": "permissionRequired", "step": "camera", "message": "Camera access requested"},
    {"type": "stepStarted", "step": "document", "message": "Scan your ID document"},
    {
        "type": "error",
        "step": "document",
        "message": "Document image too blurry",
        "meta": {"code": 422, "attempt": 1},
    },
    {"type": "stepCompleted", "step": "document", "message": "Document captured"},
    {"type": "stepStarted", "step": "selfie", "message": "Take a selfie"},
    {"type": "stepCompleted", "step": "selfie", "message": "Selfie captured"},
    {"type": "stepStarted", "step": "liveness", "message": "Liveness check"},
    {
        "type": "stepCompleted",
        "step": "liveness",
        "message": "Liveness confirmed",
        "meta": {"score": 0.97},
    },
    {"type": "flowCompleted", "message": "Onboarding finished"},
]


class ISim(Protocol):
    """Emit events the way the embedded module would."""

    async def start(self) -> None:
        """Start scripted scenario in the background."""
        ...

    async def stop(self) -> None:
        """Stop scenario."""
        ...


class Sim:
    """SIM posting a scripted onboarding flow to the events channel."""

    def __init__(
        self,
        api_url: str = "http://localhost:8000",
        client: httpx.AsyncClient | None = None,
        delay_range: tuple[float, float] = (0.5, 1.5),
    ):
        self._api_url = api_url
        self._delay_range = delay_range
        self._owns_client = client is None
        self._client = client
        self._running = False
        self._task: asyncio.Task | None = None

    @property
    def invoke_url(self) -> str:
        return f"{self._api_url}/api/channels/{CHANNEL_EVENTS}/invoke"

    @property
    def running(self) -> bool:
        return self._running

    async def start(self) -> None:
        """Start scripted scenario in the background."""
        if self._running:
            return

        self._running = True
        if self._client is None:
            self._client = httpx.AsyncClient()

        self._task = asyncio.create_task(self._run_scenario())

    async def stop(self) -> None:
        """Stop scenario."""
        self._running = False

        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        if self._client and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def run_once(self) -> int:
        """Send the whole scenario without delays. Returns events acknowledged."""
        temporary = self._client is None
        if temporary:
            self._client = httpx.AsyncClient()

        acknowledged = 0
        try:
            for event in SCENARIO:
                if await self._send_event(event):
                    acknowledged += 1
        finally:
            if temporary:
                await self._client.aclose()
                self._client = None
        return acknowledged

    async def _run_scenario(self) -> None:
        """Run scripted scenario."""
        try:
            logger.info("SIM: scenario started (%d events)", len(SCENARIO))

            for event in SCENARIO:
                if not self._running:
                    break

                await self._send_event(event)

                await asyncio.sleep(random.uniform(*self._delay_range))

        except asyncio.CancelledError:
            pass
        except Exception as e:
            logger.error("SIM scenario error: %s", e)
        finally:
            self._running = False
            logger.info("SIM: scenario finished")

    async def _send_event(self, event: dict[str, Any]) -> bool:
        """Send one event via HTTP API."""
        if not self._client:
            return False

        payload = dict(event, timestamp=int(time.time() * 1000))

        try:
            response = await self._client.post(
                self.invoke_url,
                json={"method": METHOD_ON_KYC_EVENT, "arguments": payload},
                timeout=10.0,
            )

            if response.status_code == 200:
                data = response.json()
                logger.info("SIM: %s -> %s", event["type"], data.get("status", "N/A"))
                return data.get("status") == "success"

            logger.error(
                "SIM: Error sending event: %s",
                response.status_code,
            )

        except Exception as e:
            logger.error("SIM: Failed to send event: %s", e)

        return False
