# serialization.py

from typing import List, Optional

from tonic.data_model import (
    AlcoholIntake,
    DietType,
    ExerciseFrequency,
    HealthGoal,
    InteractionAction,
    InteractionSeverity,
    InteractionWarning,
    Plan,
    PlanItem,
    Sex,
    StressLevel,
    SupplementTiming,
    Tier,
    UserProfile,
)


def _enum_or_default(enum_cls, raw, default):
    if raw is None:
        return default
    try:
        return enum_cls(raw)
    except ValueError:
        return default


def warning_to_dict(warning: InteractionWarning) -> dict:
    return {
        "drug_or_class": warning.drug_or_class,
        "interaction_type": warning.interaction_type,
        "severity": warning.severity.value,
        "mechanism": warning.mechanism,
        "action": warning.action.value,
    }


def dict_to_warning(data: dict) -> InteractionWarning:
    return InteractionWarning(
        drug_or_class=data["drug_or_class"],
        interaction_type=data.get("interaction_type", ""),
        severity=InteractionSeverity(data.get("severity", "moderate")),
        mechanism=data.get("mechanism", ""),
        action=InteractionAction(data.get("action", "other")),
    )


def item_to_dict(item: PlanItem) -> dict:
    return {
        "supplement_id": item.supplement_id,
        "name": item.name,
        "dosage": item.dosage,
        "dosage_mg": item.dosage_mg,
        "timing": item.timing.value,
        "category": item.category,
        "sort_order": item.sort_order,
        "matched_goals": list(item.matched_goals),
        "tier_score": item.tier_score,
        "tier": item.tier.value,
        "why_included": item.why_included,
        "dosage_rationale": item.dosage_rationale,
        "expected_timeline": item.expected_timeline,
        "what_to_look_for": item.what_to_look_for,
        "form_and_bioavailability": item.form_and_bioavailability,
        "interaction_note": item.interaction_note,
        "evidence_level": item.evidence_level,
        "interaction_warnings": [warning_to_dict(w) for w in item.interaction_warnings],
        "is_included": item.is_included,
        "research_note": item.research_note,
    }


def dict_to_item(data: dict) -> PlanItem:
    return PlanItem(
        supplement_id=data.get("supplement_id"),
        name=data["name"],
        dosage=data.get("dosage", ""),
        dosage_mg=float(data.get("dosage_mg") or 0),
        timing=SupplementTiming(data.get("timing", "morning")),
        category=data.get("category", ""),
        sort_order=int(data.get("sort_order") or 0),
        matched_goals=list(data.get("matched_goals") or []),
        tier_score=int(data.get("tier_score") or 0),
        tier=Tier(data.get("tier", "supporting")),
        why_included=data.get("why_included", ""),
        dosage_rationale=data.get("dosage_rationale", ""),
        expected_timeline=data.get("expected_timeline", ""),
        what_to_look_for=data.get("what_to_look_for", ""),
        form_and_bioavailability=data.get("form_and_bioavailability", ""),
        interaction_note=data.get("interaction_note", ""),
        evidence_level=data.get("evidence_level", ""),
        interaction_warnings=[dict_to_warning(w) for w in data.get("interaction_warnings") or []],
        is_included=bool(data.get("is_included", True)),
        research_note=data.get("research_note"),
    )


def plan_to_dict(plan: Plan) -> dict:
    return {
        "user_id": plan.user_id,
        "summary": plan.summary,
        "items": [item_to_dict(i) for i in plan.items],
    }


def plan_from_dict(data: Optional[dict]) -> Plan:
    if not data:
        return Plan()
    return Plan(
        items=[dict_to_item(i) for i in data.get("items") or []],
        summary=data.get("summary", ""),
        user_id=data.get("user_id"),
    )


def profile_to_dict(user: UserProfile) -> dict:
    return {
        "user_id": user.user_id,
        "age": user.age,
        "sex": user.sex.value,
        "is_pregnant": user.is_pregnant,
        "is_breastfeeding": user.is_breastfeeding,
        "height_inches": user.height_inches,
        "weight_lbs": user.weight_lbs,
        "health_goals": user.goal_keys,
        "diet_type": user.diet_type.value,
        "exercise_frequency": user.exercise_frequency.value,
        "coffee_cups_daily": user.coffee_cups_daily,
        "tea_cups_daily": user.tea_cups_daily,
        "energy_drinks_daily": user.energy_drinks_daily,
        "alcohol_weekly": user.alcohol_weekly.value,
        "stress_level": user.stress_level.value,
        "baseline_sleep": user.baseline_sleep,
        "medications": list(user.medications),
        "allergies": list(user.allergies),
        "current_supplements": list(user.current_supplements),
    }


def profile_from_dict(data: dict) -> UserProfile:
    """
    Goal keys must be valid (ValueError otherwise); the other vocabularies fall
    back to their defaults when unrecognized.
    """
    goals: List[HealthGoal] = [HealthGoal(g) for g in data.get("health_goals") or []]
    age = data.get("age")
    return UserProfile(
        user_id=data.get("user_id"),
        age=30 if age is None else int(age),
        sex=_enum_or_default(Sex, data.get("sex"), Sex.PREFER_NOT_TO_SAY),
        is_pregnant=bool(data.get("is_pregnant", False)),
        is_breastfeeding=bool(data.get("is_breastfeeding", False)),
        height_inches=data.get("height_inches"),
        weight_lbs=data.get("weight_lbs"),
        health_goals=goals,
        diet_type=_enum_or_default(DietType, data.get("diet_type"), DietType.OMNIVORE),
        exercise_frequency=_enum_or_default(ExerciseFrequency, data.get("exercise_frequency"), ExerciseFrequency.NONE),
        coffee_cups_daily=int(data.get("coffee_cups_daily") or 0),
        tea_cups_daily=int(data.get("tea_cups_daily") or 0),
        energy_drinks_daily=int(data.get("energy_drinks_daily") or 0),
        alcohol_weekly=_enum_or_default(AlcoholIntake, data.get("alcohol_weekly"), AlcoholIntake.NONE),
        stress_level=_enum_or_default(StressLevel, data.get("stress_level"), StressLevel.MODERATE),
        baseline_sleep=int(data.get("baseline_sleep") if data.get("baseline_sleep") is not None else 5),
        medications=list(data.get("medications") or []),
        allergies=list(data.get("allergies") or []),
        current_supplements=list(data.get("current_supplements") or []),
    )
