# =============================================================================
# core/services/demo_service.py - Startup Demonstration
# =============================================================================
# Exercises each outbound component once, in a fixed order:
#   1. hash a sample password
#   2. issue a token for a sample user
#   3. send a sample email
#   4. fetch a sample URL
#   5. deep-copy a sample nested object
#
# Every step catches its own errors, logs them and records them in the
# DemoReport. A failed step never stops the steps after it, and nothing
# is retried.
# =============================================================================

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Any, Awaitable, Callable

from app.exceptions import StarterServerError
from core.models.demo import DemoReport, DemoStep, SamplePayload, StepOutcome, StepStatus
from core.models.mail import MailMessage
from core.models.user import UserStub
from lib.fetcher import ExternalFetcher
from lib.hashing import PasswordHasher
from lib.mailer import Mailer
from lib.tokens import TokenIssuer

if TYPE_CHECKING:
    from app.config import Settings

SAMPLE_PASSWORD = "supersecretpassword"
SAMPLE_USER = UserStub(id="12345")
SAMPLE_SUBJECT = "Test Email"
SAMPLE_BODY = "This is a test email."
SAMPLE_PAYLOAD = SamplePayload.model_validate(
    {"name": "John", "address": {"city": "New York"}}
)


def clone_deep(obj: Any) -> Any:
    """Return a copy of obj with every nested container freshly allocated."""
    return copy.deepcopy(obj)


class DemoOrchestrator:
    """
    Runs the startup demonstration.

    Each step is a public method that can be called on its own; run() only
    sequences them and collects the outcomes.
    """

    def __init__(
        self,
        hasher: PasswordHasher,
        issuer: TokenIssuer,
        mailer: Mailer,
        fetcher: ExternalFetcher,
        settings: Settings,
        logger: logging.Logger | None = None,
    ):
        self.hasher = hasher
        self.issuer = issuer
        self.mailer = mailer
        self.fetcher = fetcher
        self.settings = settings
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings: Settings, logger: logging.Logger) -> DemoOrchestrator:
        """Wire every component from settings, sharing one logger handle."""
        return cls(
            hasher=PasswordHasher(rounds=settings.BCRYPT_ROUNDS, logger=logger),
            issuer=TokenIssuer(algorithm=settings.JWT_ALGORITHM, logger=logger),
            mailer=Mailer.from_settings(settings, logger),
            fetcher=ExternalFetcher(logger=logger),
            settings=settings,
            logger=logger,
        )

    # -------------------------------------------------------------------------
    # Steps
    # -------------------------------------------------------------------------

    async def hash_password(self, password: str = SAMPLE_PASSWORD) -> str:
        hashed = await self.hasher.hash(password)
        self.logger.info("Password hashed", extra={"hash": hashed})
        return hashed

    async def issue_token(self, user: UserStub = SAMPLE_USER) -> str:
        token = self.issuer.issue(
            user.id,
            self.settings.JWT_SECRET,
            ttl_seconds=self.settings.JWT_EXPIRES_SECONDS,
        )
        self.logger.info("JWT token generated", extra={"sub": user.id})
        return token

    async def send_email(self, message: MailMessage | None = None) -> None:
        message = message or MailMessage(
            recipient=self.settings.DEMO_RECIPIENT,
            subject=SAMPLE_SUBJECT,
            body=SAMPLE_BODY,
        )
        await self.mailer.send(message)

    async def fetch_api(self, url: str | None = None) -> Any:
        url = url or self.settings.DEMO_FETCH_URL
        data = await self.fetcher.fetch_once(url)
        self.logger.info("API Data fetched", extra={"url": url, "data": data})
        return data

    async def deep_copy(self, payload: SamplePayload = SAMPLE_PAYLOAD) -> dict[str, Any]:
        original = payload.model_dump()
        cloned = clone_deep(original)
        independent = cloned == original and cloned["address"] is not original["address"]
        self.logger.info("Original", extra={"payload": original})
        self.logger.info("Cloned", extra={"payload": cloned, "independent": independent})
        return cloned

    # -------------------------------------------------------------------------
    # Sequencing
    # -------------------------------------------------------------------------

    def steps(self) -> list[tuple[DemoStep, Callable[[], Awaitable[Any]]]]:
        return [
            (DemoStep.HASH_PASSWORD, self.hash_password),
            (DemoStep.ISSUE_TOKEN, self.issue_token),
            (DemoStep.SEND_EMAIL, self.send_email),
            (DemoStep.FETCH_API, self.fetch_api),
            (DemoStep.DEEP_COPY, self.deep_copy),
        ]

    async def _run_step(self, step: DemoStep, action: Callable[[], Awaitable[Any]]) -> StepOutcome:
        try:
            await action()
        except StarterServerError as e:
            self.logger.error(
                f"Demo step {step.value} failed: {e.message}",
                extra={"step": step.value, "code": e.code, "suggestion": e.suggestion},
            )
            return StepOutcome(step=step, status=StepStatus.FAILED, detail=e.message, error_code=e.code)
        except Exception as e:
            self.logger.exception(
                f"Demo step {step.value} failed unexpectedly: {e}",
                extra={"step": step.value},
            )
            return StepOutcome(step=step, status=StepStatus.FAILED, detail=str(e), error_code="INTERNAL_ERROR")

        return StepOutcome(step=step, status=StepStatus.SUCCEEDED)

    async def run(self) -> DemoReport:
        """
        Run every step once, in order.

        Returns:
            DemoReport with one outcome per step; never raises for a
            step failure
        """
        report = DemoReport()
        for step, action in self.steps():
            report.outcomes.append(await self._run_step(step, action))

        self.logger.info(
            "Startup demo finished",
            extra={"failed_steps": [s.value for s in report.failed_steps]},
        )
        return report
