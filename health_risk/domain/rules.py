import logging
from decimal import Decimal, ROUND_HALF_UP
from types import MappingProxyType
from typing import List

from .models import HealthInput, HealthAssessment, UrgencyLevel


logger = logging.getLogger(__name__)


SYMPTOM_WEIGHTS = MappingProxyType({
    "chest-tightness": 25,
    "dizziness": 15,
    "headache": 10,
    "fatigue": 8,
    "anxiety": 12,
    "nausea": 10,
    "fever": 15,
    "cough": 8,
})

DIAGNOSIS_RISK_FACTORS = MappingProxyType({
    "Type 2 Diabetes": 15,
    "Hypertension (High BP)": 20,
    "Asthma": 12,
    "Heart Disease": 25,
    "Thyroid Disorder": 8,
    "Anxiety Disorder": 10,
    "Sleep Apnea": 12,
})

DEFAULT_SYMPTOM_WEIGHT = 5
DEFAULT_DIAGNOSIS_RISK = 5

CHEST_TIGHTNESS = "chest-tightness"

EMERGENCY_THRESHOLD = 70
MONITOR_THRESHOLD = 40

GENERAL_PHYSICIAN = "General Physician"
CARDIOLOGIST = "Cardiologist"
PULMONOLOGIST = "Pulmonologist"
EMERGENCY_SPECIALIST = "Emergency Medicine Specialist"

CLOSING_CLAUSES = MappingProxyType({
    "emergency": "Given your symptoms and health profile, we strongly recommend seeking immediate medical consultation.",
    "monitor": "We recommend scheduling a check-up with your healthcare provider within the next few days.",
    "normal": "Continue maintaining healthy habits and log any new symptoms for tracking.",
})


def _round_half_up(value: float) -> int:
    # Decimal(value) is exact, so 0.49999999999999994 stays below the half.
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def score_label(score: int) -> str:
    # Independent of the urgency thresholds: 45 is "monitor" but "moderate".
    if score < 30:
        return "low"
    if score < 60:
        return "moderate"
    if score < 80:
        return "elevated"
    return "high"


def build_summary(score: int, urgency: UrgencyLevel, health_input: HealthInput) -> str:
    summary = f"Your current health risk score is {score}/100 ({score_label(score)}). "

    if health_input.symptoms:
        summary += (
            f"You reported {len(health_input.symptoms)} symptom(s) "
            f"with a severity of {health_input.severity}/10. "
        )

    if health_input.sleep_score < 60:
        summary += "Your sleep quality needs attention. "

    summary += CLOSING_CLAUSES.get(urgency, CLOSING_CLAUSES["normal"])
    return summary


def analyze_health(health_input: HealthInput) -> HealthAssessment:
    """
    Score a health profile and classify how urgently it needs attention.

    Rules run in a fixed order; each one may add to the raw score and
    append a reasoning entry. The raw score is rounded half-up and clamped
    to 0-100 before urgency is decided.

    Args:
        health_input: Symptoms, sleep score, history and lifestyle flags

    Returns:
        HealthAssessment with score, urgency, doctor type, reasoning and summary
    """
    reasoning: List[str] = []
    raw_score = 0.0

    symptoms = health_input.symptoms
    if symptoms:
        for symptom in symptoms:
            weight = SYMPTOM_WEIGHTS.get(symptom, DEFAULT_SYMPTOM_WEIGHT)
            raw_score += weight * (health_input.severity / 10)
        reasoning.append(
            f"{len(symptoms)} symptom(s) reported with severity {health_input.severity}/10"
        )

    sleep_score = health_input.sleep_score
    if sleep_score < 50:
        raw_score += 15
        reasoning.append(f"Low sleep score ({sleep_score}) indicates poor rest quality")
    elif sleep_score < 70:
        raw_score += 8
        reasoning.append(f"Moderate sleep score ({sleep_score}) suggests room for improvement")

    for diagnosis in health_input.past_diagnoses:
        raw_score += DIAGNOSIS_RISK_FACTORS.get(diagnosis, DEFAULT_DIAGNOSIS_RISK)
        reasoning.append(f"Pre-existing condition: {diagnosis} increases baseline risk")

    # Lifestyle factors
    if health_input.smoking:
        raw_score += 15
        reasoning.append("Smoking habit significantly increases health risks")

    if health_input.alcohol:
        raw_score += 8
        reasoning.append("Alcohol consumption contributes to risk factors")

    if health_input.activity_level == "sedentary":
        raw_score += 10
        reasoning.append("Sedentary lifestyle increases cardiovascular risk")

    age = health_input.age
    if age is not None:
        if age > 60:
            raw_score += 15
            reasoning.append("Age-related risk factors considered")
        elif age > 45:
            raw_score += 8
            reasoning.append("Middle-age health considerations factored in")

    score = min(100, max(0, _round_half_up(raw_score)))
    logger.debug("Raw risk score %.2f clamped to %s", raw_score, score)

    urgency: UrgencyLevel = "normal"
    doctor = GENERAL_PHYSICIAN
    has_chest_tightness = CHEST_TIGHTNESS in symptoms

    if score >= EMERGENCY_THRESHOLD or has_chest_tightness:
        urgency = "emergency"
        doctor = CARDIOLOGIST if has_chest_tightness else EMERGENCY_SPECIALIST
        reasoning.append("⚠️ Elevated risk detected - immediate medical attention recommended")
    elif score >= MONITOR_THRESHOLD:
        urgency = "monitor"
        if "Heart Disease" in health_input.past_diagnoses:
            doctor = CARDIOLOGIST
        elif "Asthma" in health_input.past_diagnoses:
            doctor = PULMONOLOGIST
        reasoning.append("Regular monitoring and follow-up consultation advised")
    else:
        reasoning.append("Current health status appears stable")

    return HealthAssessment(
        health_risk_score=score,
        urgency_level=urgency,
        recommended_doctor_type=doctor,
        reasoning=reasoning,
        summary=build_summary(score, urgency, health_input),
    )
