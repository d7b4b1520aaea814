# dosage_calculator.py

from typing import Tuple

from tonic.data_model import Sex, SupplementDefinition, SupplementTiming, UserProfile

SENIOR_AGE = 65
SENIOR_DOSE_FACTOR = 0.75
SENIOR_REDUCED = ("Rhodiola Rosea", "CoQ10")

IRON = "Iron"
IRON_RDA_FEMALE = 27.0
IRON_RDA_MALE = 8.0

HIGH_WEIGHT_LBS = 200
VITAMIN_D = "Vitamin D3 + K2"
VITAMIN_D_HIGH_DOSE = 4000.0


def adjust_dosage(supplement: SupplementDefinition, user: UserProfile) -> float:
    """Base dose with the age, sex and body-weight rules applied."""
    dosage = float(supplement.recommended_dosage_mg)

    if user.age is not None and user.age > SENIOR_AGE and supplement.name in SENIOR_REDUCED:
        dosage *= SENIOR_DOSE_FACTOR

    if supplement.name == IRON:
        if user.sex == Sex.FEMALE:
            dosage = IRON_RDA_FEMALE
        elif user.sex == Sex.MALE:
            dosage = IRON_RDA_MALE

    if user.weight_lbs is not None and user.weight_lbs > HIGH_WEIGHT_LBS and supplement.name == VITAMIN_D:
        dosage = VITAMIN_D_HIGH_DOSE

    return dosage


def _number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:.1f}"


def format_dosage(supplement: SupplementDefinition, dosage: float) -> str:
    if supplement.name == VITAMIN_D:
        return f"{int(dosage)} IU"
    if supplement.name == "Probiotics":
        return supplement.common_dosage_range
    if supplement.name == "Vitamin B Complex":
        return "1x daily"
    if supplement.name == "Biotin":
        return f"{int(dosage * 1000)}mcg"
    if dosage >= 1000:
        return f"{_number(dosage / 1000)}g"
    return f"{int(dosage)}mg"


def resolve_timing(supplement: SupplementDefinition, user: UserProfile) -> SupplementTiming:
    # No profile-based conflict resolution; the catalog timing is used as-is.
    return supplement.recommended_timing


def resolve_dosage(supplement: SupplementDefinition, user: UserProfile) -> Tuple[float, str, SupplementTiming]:
    """
    Returns: (dosage, formatted dosage, timing)
    """
    dosage = adjust_dosage(supplement, user)
    return dosage, format_dosage(supplement, dosage), resolve_timing(supplement, user)
