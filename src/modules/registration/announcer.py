"""Self-registration with the micro-frontend host registry."""

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Any

import aiohttp

from src.utils.logger import get_logger
from src.utils.settings.registry import RegistrySettings

logger = get_logger(__name__)

ADMIN_TOKEN_HEADER = "x-admin-token"

MODULE_NAME = "Organisation"
MODULE_DESCRIPTION = "Organisation MFE - hantera företagsinformation"
MODULE_SCOPE = "organizationMfe"
MODULE_EXPOSED = "./App"
MODULE_ICON = "\U0001f3e2"
MODULE_ROUTE = "/organization"


class AnnouncementStatus(str, Enum):
    SKIPPED = "skipped"
    REGISTERED = "registered"
    REJECTED = "rejected"
    FAILED = "failed"


@dataclass
class AnnouncementResult:
    status: AnnouncementStatus
    http_status: int | None = None
    body: str | None = None
    error: str | None = None


def build_registration_payload(entry_url: str) -> dict[str, Any]:
    return {
        "name": MODULE_NAME,
        "description": MODULE_DESCRIPTION,
        "scope": MODULE_SCOPE,
        "module": MODULE_EXPOSED,
        "entry_url": entry_url,
        "icon": MODULE_ICON,
        "route": MODULE_ROUTE,
    }


class RegistrationAnnouncer:
    """Announces this service's UI module to the host registry once.

    The host deduplicates repeated announcements, so every restart simply
    sends the same payload again. Failures are logged and never raised.
    """

    def __init__(self, settings: RegistrySettings | None = None):
        self.settings = settings or RegistrySettings()

    async def announce(self) -> AnnouncementResult:
        if not self.settings.enabled:
            logger.info("No MFE_ADMIN_TOKEN set, skipping auto-registration")
            return AnnouncementResult(AnnouncementStatus.SKIPPED)

        url = self.settings.modules_endpoint
        headers = {
            "Content-Type": "application/json",
            ADMIN_TOKEN_HEADER: self.settings.MFE_ADMIN_TOKEN.get_secret_value(),
        }
        payload = build_registration_payload(self.settings.MFE_ENTRY_URL)

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    url,
                    json=payload,
                    headers=headers,
                    timeout=aiohttp.ClientTimeout(
                        total=self.settings.MFE_REGISTRATION_TIMEOUT
                    ),
                ) as response:
                    body = await response.text()
                    if response.ok:
                        logger.info(
                            "Auto-registered with MFE host",
                            url=url,
                            status_code=response.status,
                        )
                        return AnnouncementResult(
                            AnnouncementStatus.REGISTERED, response.status, body
                        )

                    logger.warning(
                        "Auto-registration rejected by MFE host",
                        url=url,
                        status_code=response.status,
                        body=body[:500],
                    )
                    return AnnouncementResult(
                        AnnouncementStatus.REJECTED, response.status, body
                    )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(
                "Auto-registration failed (host may not be ready)",
                url=url,
                error=str(e) or type(e).__name__,
                error_type=type(e).__name__,
            )
            return AnnouncementResult(
                AnnouncementStatus.FAILED, error=str(e) or type(e).__name__
            )


def launch_announcement(
    announcer: RegistrationAnnouncer,
) -> asyncio.Task[AnnouncementResult]:
    """Start the announcement in the background and return its task."""
    task = asyncio.create_task(announcer.announce(), name="mfe-registration")
    task.add_done_callback(_log_unexpected_failure)
    return task


def _log_unexpected_failure(task: asyncio.Task) -> None:
    if task.cancelled():
        logger.info("Auto-registration cancelled")
        return
    error = task.exception()
    if error is not None:
        logger.error(
            "Auto-registration crashed",
            error_type=type(error).__name__,
            exc_info=error,
        )
