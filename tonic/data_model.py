# data_model.py

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

# --- Enumerations ---

class HealthGoal(str, Enum):
    ENERGY = "energy"
    SLEEP = "sleep"
    STRESS_ANXIETY = "stress_anxiety"
    FOCUS = "focus"
    GUT_HEALTH = "gut_health"
    IMMUNE_SUPPORT = "immune_support"
    MUSCLE_RECOVERY = "muscle_recovery"
    SKIN_HAIR_NAILS = "skin_hair_nails"
    HEART_HEALTH = "heart_health"
    LONGEVITY = "longevity"

    @property
    def label(self) -> str:
        return _GOAL_LABELS[self]

    @property
    def descriptor(self) -> str:
        """Lower-case phrase used inside generated sentences."""
        return _GOAL_DESCRIPTORS[self]


_GOAL_LABELS = {
    HealthGoal.ENERGY: "More energy",
    HealthGoal.SLEEP: "Better sleep",
    HealthGoal.STRESS_ANXIETY: "Stress & anxiety relief",
    HealthGoal.FOCUS: "Mental clarity & focus",
    HealthGoal.GUT_HEALTH: "Gut health & digestion",
    HealthGoal.IMMUNE_SUPPORT: "Immune support",
    HealthGoal.MUSCLE_RECOVERY: "Muscle growth & recovery",
    HealthGoal.SKIN_HAIR_NAILS: "Skin, hair & nails",
    HealthGoal.HEART_HEALTH: "Heart health",
    HealthGoal.LONGEVITY: "Longevity",
}

_GOAL_DESCRIPTORS = {
    HealthGoal.ENERGY: "more energy",
    HealthGoal.SLEEP: "better sleep",
    HealthGoal.STRESS_ANXIETY: "stress & anxiety relief",
    HealthGoal.FOCUS: "mental clarity & focus",
    HealthGoal.GUT_HEALTH: "gut health & digestion",
    HealthGoal.IMMUNE_SUPPORT: "immune support",
    HealthGoal.MUSCLE_RECOVERY: "muscle growth & recovery",
    HealthGoal.SKIN_HAIR_NAILS: "healthy skin, hair & nails",
    HealthGoal.HEART_HEALTH: "heart health",
    HealthGoal.LONGEVITY: "longevity",
}

GOAL_ORDER = {goal: index for index, goal in enumerate(HealthGoal)}


class SupplementCategory(str, Enum):
    MINERAL = "mineral"
    VITAMIN = "vitamin"
    FATTY_ACID = "fatty_acid"
    ADAPTOGEN = "adaptogen"
    AMINO_ACID = "amino_acid"
    PROBIOTIC = "probiotic"
    COENZYME = "coenzyme"
    PROTEIN = "protein"
    MUSHROOM = "mushroom"
    HORMONE = "hormone"
    PLANT_EXTRACT = "plant_extract"
    FRUIT_EXTRACT = "fruit_extract"
    BOTANICAL = "botanical"


class SupplementTiming(str, Enum):
    EMPTY_STOMACH = "empty_stomach"
    MORNING = "morning"
    WITH_FOOD = "with_food"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    BEDTIME = "bedtime"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()

    @property
    def sort_order(self) -> int:
        return list(SupplementTiming).index(self)


class Tier(str, Enum):
    CORE = "core"
    TARGETED = "targeted"
    SUPPORTING = "supporting"

    @property
    def label(self) -> str:
        return self.value.upper()

    @property
    def description(self) -> str:
        return {
            Tier.CORE: "Works across multiple goals",
            Tier.TARGETED: "Focused on a specific goal",
            Tier.SUPPORTING: "Rounds out your plan",
        }[self]

    @property
    def sort_order(self) -> int:
        return list(Tier).index(self)


class EvidenceLevel(str, Enum):
    STRONG = "strong"
    MODERATE = "moderate"
    EMERGING = "emerging"

    @property
    def label(self) -> str:
        return {
            EvidenceLevel.STRONG: "Extensive Research",
            EvidenceLevel.MODERATE: "Clinical Research",
            EvidenceLevel.EMERGING: "Emerging Research",
        }[self]


class InteractionAction(str, Enum):
    SEPARATE_TIMING = "separate_timing"
    MONITOR = "monitor"
    ADJUST_DOSE = "adjust_dose"
    OTHER = "other"


class InteractionSeverity(str, Enum):
    MINOR = "minor"
    MODERATE = "moderate"
    MAJOR = "major"
    CONTRAINDICATED = "contraindicated"

    @property
    def requires_removal(self) -> bool:
        return self in (InteractionSeverity.MAJOR, InteractionSeverity.CONTRAINDICATED)


class ContraindicationSeverity(str, Enum):
    ABSOLUTE = "absolute"
    RELATIVE = "relative"


class DecisionKind(str, Enum):
    CLEAR = "clear"
    KEEP_WITH_WARNINGS = "keep_with_warnings"
    REMOVE = "remove"


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class DietType(str, Enum):
    OMNIVORE = "omnivore"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    KETO = "keto"
    PALEO = "paleo"
    PESCATARIAN = "pescatarian"
    HALAL = "halal"
    MEDITERRANEAN = "mediterranean"
    LOW_CARB = "low_carb"
    OTHER = "other"


class ExerciseFrequency(str, Enum):
    NONE = "none"
    ONE_TO_TWO = "1-2_weekly"
    THREE_TO_FOUR = "3-4_weekly"
    FIVE_PLUS = "5+_weekly"


class AlcoholIntake(str, Enum):
    NONE = "none"
    ONE_TO_THREE = "1-3_drinks"
    FOUR_TO_SEVEN = "4-7_drinks"
    EIGHT_PLUS = "8+_drinks"


class StressLevel(str, Enum):
    NONE = "none"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very_high"


# --- Catalog Models ---

@dataclass(frozen=True)
class SupplementDefinition:
    id: str
    name: str
    category: SupplementCategory
    common_dosage_range: str                 # display only, e.g. "200-400mg"
    recommended_dosage_mg: float             # base dose before personalization
    recommended_timing: SupplementTiming
    benefits: tuple = ()                     # goal keys
    contraindications: tuple = ()            # condition keys
    drug_interactions: tuple = ()            # interaction keys
    notes: str = ""
    dosage_rationale: str = ""
    expected_timeline: str = ""
    what_to_look_for: str = ""               # may contain {caffeine_note} / {stress_note} / {exercise_note}
    form_and_bioavailability: str = ""
    evidence_level: EvidenceLevel = EvidenceLevel.MODERATE


@dataclass(frozen=True)
class GoalSupplementEntry:
    goal: HealthGoal
    name: str
    weight: int  # 3 = meta-analyses or 3+ RCTs, 2 = limited RCTs, 1 = mechanistic/preclinical


@dataclass(frozen=True)
class Synergy:
    partner: str
    mechanism: str


@dataclass(frozen=True)
class DrugInteractionRecord:
    supplement_name: str
    drug_or_class: str      # interaction key, e.g. "warfarin", "blood_pressure"
    interaction_type: str   # pharmacokinetic, pharmacodynamic, nutrient_depletion, additive
    severity: InteractionSeverity
    mechanism: str
    action: InteractionAction


@dataclass(frozen=True)
class Contraindication:
    supplement_name: str
    condition: str
    severity: ContraindicationSeverity
    rationale: str = ""


@dataclass(frozen=True)
class Medication:
    name: str
    category: str
    generic_name: Optional[str] = None
    interaction_keys: tuple = ()


# --- Engine Output Models ---

@dataclass
class InteractionWarning:
    drug_or_class: str
    interaction_type: str
    severity: InteractionSeverity
    mechanism: str
    action: InteractionAction

    @classmethod
    def from_record(cls, record: DrugInteractionRecord) -> "InteractionWarning":
        return cls(
            drug_or_class=record.drug_or_class,
            interaction_type=record.interaction_type,
            severity=record.severity,
            mechanism=record.mechanism,
            action=record.action,
        )

    @property
    def label(self) -> str:
        return self.drug_or_class.replace("_", " ")


@dataclass
class InteractionDecision:
    kind: DecisionKind
    interactions: List[InteractionWarning] = field(default_factory=list)


@dataclass
class PlanItem:
    supplement_id: Optional[str]
    name: str
    dosage: str
    dosage_mg: float
    timing: SupplementTiming
    category: str
    sort_order: int = 0
    matched_goals: List[str] = field(default_factory=list)
    tier_score: int = 0
    tier: Tier = Tier.SUPPORTING
    why_included: str = ""
    dosage_rationale: str = ""
    expected_timeline: str = ""
    what_to_look_for: str = ""
    form_and_bioavailability: str = ""
    interaction_note: str = ""
    evidence_level: str = ""
    interaction_warnings: List[InteractionWarning] = field(default_factory=list)
    is_included: bool = True
    research_note: Optional[str] = None


@dataclass
class Plan:
    items: List[PlanItem] = field(default_factory=list)
    summary: str = ""
    user_id: Optional[str] = None

    def names(self) -> List[str]:
        return [item.name for item in self.items]

    def item_named(self, name: str) -> Optional[PlanItem]:
        return next((item for item in self.items if item.name == name), None)

    def included_items(self) -> List[PlanItem]:
        return [item for item in self.items if item.is_included]


# --- Core User Model ---

@dataclass
class UserProfile:
    user_id: Optional[str] = None
    age: int = 30
    sex: Sex = Sex.PREFER_NOT_TO_SAY
    is_pregnant: bool = False
    is_breastfeeding: bool = False
    height_inches: Optional[int] = None
    weight_lbs: Optional[int] = None

    health_goals: List[HealthGoal] = field(default_factory=list)

    diet_type: DietType = DietType.OMNIVORE
    exercise_frequency: ExerciseFrequency = ExerciseFrequency.NONE
    coffee_cups_daily: int = 0
    tea_cups_daily: int = 0
    energy_drinks_daily: int = 0
    alcohol_weekly: AlcoholIntake = AlcoholIntake.NONE
    stress_level: StressLevel = StressLevel.MODERATE
    baseline_sleep: int = 5  # 0-10 self-rating from onboarding

    medications: List[str] = field(default_factory=list)
    allergies: List[str] = field(default_factory=list)
    current_supplements: List[str] = field(default_factory=list)

    def __post_init__(self):
        # plain strings from callers become the matching enum members
        self.sex = Sex(self.sex)
        self.diet_type = DietType(self.diet_type)
        self.exercise_frequency = ExerciseFrequency(self.exercise_frequency)
        self.alcohol_weekly = AlcoholIntake(self.alcohol_weekly)
        self.stress_level = StressLevel(self.stress_level)

    @property
    def goal_keys(self) -> List[str]:
        """Selected goals, de-duplicated and in canonical order."""
        unique = {HealthGoal(g) for g in self.health_goals}
        return [g.value for g in sorted(unique, key=GOAL_ORDER.get)]

    @property
    def caffeine_servings(self) -> int:
        return (self.coffee_cups_daily or 0) + (self.tea_cups_daily or 0) + (self.energy_drinks_daily or 0)

    @property
    def has_caffeine_intake(self) -> bool:
        return self.caffeine_servings > 0

    @property
    def is_high_stress(self) -> bool:
        return self.stress_level in (StressLevel.HIGH, StressLevel.VERY_HIGH)

    @property
    def is_active(self) -> bool:
        return self.exercise_frequency in (ExerciseFrequency.THREE_TO_FOUR, ExerciseFrequency.FIVE_PLUS)

    @property
    def is_plant_based(self) -> bool:
        return self.diet_type in (DietType.VEGAN, DietType.VEGETARIAN)

    @property
    def has_low_sleep_baseline(self) -> bool:
        return self.baseline_sleep is not None and self.baseline_sleep <= 4

    @property
    def is_pregnant_or_breastfeeding(self) -> bool:
        return bool(self.is_pregnant or self.is_breastfeeding)
