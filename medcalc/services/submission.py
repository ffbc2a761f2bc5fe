"""Calculation submission service.

Bundles a finished calculation with its context and hands it to a
``SubmissionTransport``. The transport owns encryption, retries and the
HTTP call; this service only guards against duplicate submissions,
records completion and logs the outcome.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Optional, Protocol

from medcalc.core.config import Settings, settings as default_settings
from medcalc.core.logging import UserActionLogger, user_action_logger
from medcalc.schemas.bundle import CalculatorConfig, SubmissionData, SubmissionMetadata
from medcalc.schemas.patient import PatientData
from medcalc.scoring.result import CalculationResult

logger = logging.getLogger(__name__)


class SubmissionTransport(Protocol):
    """Sends a submission bundle to the server.

    Implementations encrypt the payload with the key published at
    ``public_key_url`` and POST it to ``server_url``, retrying as they see
    fit. Any exception raised is treated as a failed submission.
    """

    async def send(
        self,
        server_url: str,
        public_key_url: str,
        payload: dict[str, Any],
        *,
        calculator_type: str,
        correlation_id: str,
    ) -> None: ...


class Notifier(Protocol):
    """User-facing notifications (toasts in the UI)."""

    def success(self, title: str, message: str) -> None: ...


class LoggingNotifier:
    """Notifier that writes notifications to the log."""

    def success(self, title: str, message: str) -> None:
        logger.info(f"{title}: {message}")


@dataclass
class SubmissionState:
    is_submitting: bool = False
    is_complete: bool = False
    completion_time: Optional[datetime] = None


def new_correlation_id() -> str:
    return str(uuid.uuid4())


class SubmissionService:
    """Submits calculation results to the configured server.

    One instance tracks one form session; ``state`` is not shared between
    instances.
    """

    def __init__(
        self,
        transport: SubmissionTransport,
        notifier: Optional[Notifier] = None,
        action_logger: Optional[UserActionLogger] = None,
        correlation_id_factory: Callable[[], str] = new_correlation_id,
        settings: Optional[Settings] = None,
    ) -> None:
        self.transport = transport
        self.notifier = notifier or LoggingNotifier()
        self.action_logger = action_logger or user_action_logger
        self.correlation_id_factory = correlation_id_factory
        self.settings = settings or default_settings
        self.state = SubmissionState()

    def prepare_submission_data(
        self,
        config: CalculatorConfig,
        patient: PatientData,
        responses: dict[str, Any],
        result: CalculationResult,
        session_id: str,
        duration: float,
    ) -> SubmissionData:
        """Bundle a finished calculation, stamped with the current time."""
        return SubmissionData(
            config=config,
            patient=patient,
            responses=dict(responses),
            result=result,
            metadata=SubmissionMetadata(
                session_id=session_id,
                duration=duration,
                version=config.version,
                timestamp=datetime.now(timezone.utc),
            ),
        )

    async def submit_to_server(
        self,
        data: SubmissionData,
        server_url: str,
        public_key_url: str,
    ) -> bool:
        """Send a bundle through the transport.

        Returns:
            True if the transport accepted the bundle. False if a submission
            is already in progress or the transport failed.
        """
        if self.state.is_submitting:
            logger.warning(
                "Submission already in progress, ignoring duplicate request",
                extra={"calculator_type": data.config.type},
            )
            return False

        self.state.is_submitting = True
        calculator_type = data.config.type
        session_id = data.metadata.session_id
        correlation_id = self.correlation_id_factory()

        try:
            await self.transport.send(
                server_url,
                public_key_url,
                data.to_payload(),
                calculator_type=calculator_type,
                correlation_id=correlation_id,
            )
        except Exception as e:
            logger.error(
                f"Submission failed: {e}",
                extra={
                    "calculator_type": calculator_type,
                    "session_id": session_id,
                    "correlation_id": correlation_id,
                },
            )
            return False
        finally:
            self.state.is_submitting = False

        self.notifier.success("Data sendt", "Beregningen er gemt og sendt til serveren.")

        self.state.is_complete = True
        self.state.completion_time = datetime.now(timezone.utc)

        self.action_logger.log(
            "calculation_completed",
            {
                "score": data.result.score,
                "riskLevel": data.result.risk_level.value,
                "duration": data.metadata.duration,
                "sessionId": session_id,
            },
            calculator_type=calculator_type,
        )
        return True

    async def submit_calculation(
        self,
        config: CalculatorConfig,
        patient: PatientData,
        responses: dict[str, Any],
        result: CalculationResult,
        session_id: str,
        duration: float,
    ) -> bool:
        """Prepare a bundle and submit it if a server is configured.

        Without ``api_url`` and ``public_key_url`` in settings the result is
        only confirmed locally.

        Returns:
            False if the submission was attempted and failed, else True.
        """
        data = self.prepare_submission_data(
            config, patient, responses, result, session_id, duration
        )

        if self.settings.submission_enabled:
            success = await self.submit_to_server(
                data, self.settings.api_url, self.settings.public_key_url
            )
            if not success:
                return False
        else:
            logger.debug(
                "Submission not configured, skipping server submission",
                extra={"calculator_type": config.type, "session_id": session_id},
            )

        self.notifier.success(
            "Beregning fuldført",
            f"{config.name} er beregnet med resultat: {result.score}",
        )
        return True

    def reset_submission_state(self) -> None:
        self.state = SubmissionState()
