import logging
from typing import Optional

from pydantic import ValidationError

from health_risk.application.ports import CredentialGeneratorPort
from health_risk.domain.models import AccessCredential, HealthAssessment, HealthInput
from health_risk.domain.rules import analyze_health
from health_risk.domain.sleep import calculate_sleep_score
from health_risk.infrastructure.credentials.mock_keys import MockCredentialAdapter


logger = logging.getLogger(__name__)


class HealthAnalysisUseCase:
    def __init__(self, credentials: Optional[CredentialGeneratorPort] = None):
        self.credentials = credentials or MockCredentialAdapter()

    def assess(self, health_input: HealthInput) -> HealthAssessment:
        assessment = analyze_health(health_input)

        if assessment.urgency_level == "emergency":
            logger.warning(
                "Emergency urgency: score=%s doctor=%s",
                assessment.health_risk_score,
                assessment.recommended_doctor_type,
            )
        else:
            logger.info(
                "Health assessed: score=%s urgency=%s",
                assessment.health_risk_score,
                assessment.urgency_level,
            )
        return assessment

    def assess_payload(self, payload: dict) -> HealthAssessment:
        """Validate a camelCase or snake_case dict and assess it."""
        try:
            health_input = HealthInput.model_validate(payload)
        except ValidationError as e:
            logger.warning("Health input invalid: %s", e)
            raise
        return self.assess(health_input)

    def assess_with_sleep(self, health_input: HealthInput, hours: float, quality: str) -> HealthAssessment:
        """Recompute the sleep score from logged hours and quality, then assess."""
        sleep_score = calculate_sleep_score(hours, quality)
        logger.debug("Sleep score %s from %s hours (%s)", sleep_score, hours, quality)
        return self.assess(health_input.model_copy(update={"sleep_score": sleep_score}))

    def issue_access_key(self) -> AccessCredential:
        return self.credentials.generate_access_key()
