from typing import List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


UrgencyLevel = Literal["normal", "monitor", "emergency"]


class HealthInput(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    symptoms: Tuple[str, ...] = ()
    severity: int
    sleep_score: int
    allergies: Tuple[str, ...] = ()  # accepted but not scored
    past_diagnoses: Tuple[str, ...] = ()
    age: Optional[int] = None
    smoking: Optional[bool] = None
    alcohol: Optional[bool] = None
    activity_level: Optional[str] = None


class HealthAssessment(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    health_risk_score: int
    urgency_level: UrgencyLevel
    recommended_doctor_type: str
    reasoning: List[str] = []
    summary: str


class AccessCredential(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    access_key: str
    key_hash: str  # mock digest, not derived from anything
