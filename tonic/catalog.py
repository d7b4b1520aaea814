# catalog.py

import logging
import re
from types import MappingProxyType
from typing import Dict, Iterable, List, Optional, Set, Tuple

from tonic import knowledge_base as kb
from tonic.data_model import (
    Contraindication,
    ContraindicationSeverity,
    DecisionKind,
    DrugInteractionRecord,
    EvidenceLevel,
    GoalSupplementEntry,
    HealthGoal,
    InteractionAction,
    InteractionDecision,
    InteractionSeverity,
    InteractionWarning,
    Medication,
    SupplementCategory,
    SupplementDefinition,
    SupplementTiming,
    Synergy,
)

_TOKEN_SPLIT = re.compile(r"[^a-z0-9]+")
_FIRST_NUMBER = re.compile(r"\d+(?:\.\d+)?")

# knowledge-base "synthesis_confidence" vocabulary → evidence level
_CONFIDENCE_TO_EVIDENCE = {"high": "strong", "moderate": "moderate", "low": "emerging"}

logger = logging.getLogger("uvicorn.error")


class CatalogError(ValueError):
    """Catalog data failed validation. Fatal for whoever is building the catalog."""
    pass


def _enum(enum_cls, raw, what: str):
    try:
        return enum_cls(raw)
    except ValueError:
        raise CatalogError(f"Unknown {what}: {raw!r}")


def _enum_or_default(enum_cls, raw, default, what: str):
    """Remote rows with an unrecognized value keep the default instead of failing the load."""
    try:
        return enum_cls(raw)
    except ValueError:
        logger.warning(f"Unknown {what} {raw!r}; using {default.value}")
        return default


def _tokens(text: str) -> List[str]:
    return [t for t in _TOKEN_SPLIT.split((text or "").lower()) if t]


class Catalog:
    """
    Read-only lookup structure over supplement definitions, goal weights,
    interaction/synergy tables and the medication list.

    Build once (see build_static_catalog / Catalog.from_snapshot or
    tonic.catalog_loader.load_catalog) and share it; nothing mutates it afterwards.
    """

    def __init__(
        self,
        supplements: Iterable[SupplementDefinition],
        goal_entries: Iterable[GoalSupplementEntry],
        synergies: Optional[Dict[str, Iterable[Synergy]]] = None,
        interactions: Iterable[DrugInteractionRecord] = (),
        contraindications: Iterable[Contraindication] = (),
        medications: Iterable[Medication] = (),
        allergy_exclusions: Optional[Dict[str, Iterable[str]]] = None,
        pregnancy_exclusions: Iterable[str] = (),
        diet_additions: Optional[Dict[str, Iterable[str]]] = None,
        why_phrases: Optional[Dict[str, str]] = None,
        diet_addition_reasons: Optional[Dict[str, str]] = None,
        category_labels: Optional[Dict[str, str]] = None,
    ):
        self._by_name: Dict[str, SupplementDefinition] = {}
        self._by_id: Dict[str, SupplementDefinition] = {}
        for supp in supplements:
            if supp.name in self._by_name:
                raise CatalogError(f"Duplicate supplement name: {supp.name}")
            if supp.id in self._by_id:
                raise CatalogError(f"Duplicate supplement id: {supp.id}")
            self._by_name[supp.name] = supp
            self._by_id[supp.id] = supp

        goal_map: Dict[HealthGoal, List[GoalSupplementEntry]] = {}
        for entry in goal_entries:
            goal = _enum(HealthGoal, entry.goal, "goal key")
            if entry.name not in self._by_name:
                raise CatalogError(f"Goal map references unknown supplement: {entry.name}")
            if not 1 <= int(entry.weight) <= 3:
                raise CatalogError(f"Weight for {entry.name}/{goal.value} must be 1..3, got {entry.weight}")
            goal_map.setdefault(goal, []).append(GoalSupplementEntry(goal=goal, name=entry.name, weight=int(entry.weight)))
        self._goal_map = {goal: tuple(entries) for goal, entries in goal_map.items()}
        self._weights = {(e.name, e.goal): e.weight for entries in self._goal_map.values() for e in entries}

        self._synergies = {name: tuple(pairs) for name, pairs in (synergies or {}).items()}

        self._interactions: Dict[str, Tuple[DrugInteractionRecord, ...]] = {}
        for record in interactions:
            if record.supplement_name not in self._by_name:
                raise CatalogError(f"Interaction references unknown supplement: {record.supplement_name}")
            self._interactions[record.supplement_name] = self._interactions.get(record.supplement_name, ()) + (record,)
        self._interaction_keys = frozenset(r.drug_or_class for rs in self._interactions.values() for r in rs)

        self._contraindications = tuple(contraindications)
        self._medications = tuple(medications)
        self._med_index: Dict[str, Medication] = {}
        for med in self._medications:
            self._med_index.setdefault(med.name.lower(), med)
            if med.generic_name:
                self._med_index.setdefault(med.generic_name.lower(), med)

        self.allergy_exclusions = MappingProxyType({k.lower(): tuple(v) for k, v in (allergy_exclusions or {}).items()})
        self.pregnancy_exclusions = frozenset(pregnancy_exclusions)
        self._diet_additions = {k: tuple(v) for k, v in (diet_additions or {}).items()}
        self._diet_addition_reasons = dict(diet_addition_reasons or {})
        self._why_phrases = dict(why_phrases or {})
        self._category_labels = dict(category_labels or {})

    # --- Supplement lookups ---

    def supplement(self, name: str) -> Optional[SupplementDefinition]:
        return self._by_name.get(name)

    def supplement_by_id(self, supplement_id: str) -> Optional[SupplementDefinition]:
        return self._by_id.get(supplement_id)

    def all_supplements(self) -> List[SupplementDefinition]:
        return list(self._by_name.values())

    def supplements_by_category(self) -> Dict[str, List[SupplementDefinition]]:
        """Catalog grouped by category, in category enum order."""
        grouped: Dict[str, List[SupplementDefinition]] = {}
        for category in SupplementCategory:
            members = [s for s in self._by_name.values() if s.category == category]
            if members:
                grouped[category.value] = members
        return grouped

    def category_label(self, category: str) -> str:
        key = getattr(category, "value", category)
        return self._category_labels.get(key) or key.replace("_", " ").title()

    # --- Goal weights ---

    def goal_mappings(self, goal) -> Tuple[GoalSupplementEntry, ...]:
        try:
            return self._goal_map.get(HealthGoal(goal), ())
        except ValueError:
            return ()

    def weight(self, name: str, goal) -> int:
        try:
            return self._weights.get((name, HealthGoal(goal)), 0)
        except ValueError:
            return 0

    # --- Narrative tables ---

    def synergies(self, name: str) -> Tuple[Synergy, ...]:
        return self._synergies.get(name, ())

    def why_phrase(self, name: str) -> Optional[str]:
        return self._why_phrases.get(name)

    def diet_additions(self, diet) -> Tuple[str, ...]:
        return self._diet_additions.get(getattr(diet, "value", diet), ())

    def diet_addition_reason(self, name: str) -> Optional[str]:
        return self._diet_addition_reasons.get(name)

    def is_diet_addition(self, name: str, diet) -> bool:
        return name in self.diet_additions(diet)

    # --- Interactions ---

    def collect_interaction_keys(self, medications: Iterable[str]) -> Set[str]:
        """
        Map free-form medication entries to interaction keys.
        Exact name/alias match first, then per-token match against the
        medication list, then tokens that are interaction keys themselves
        ("blood thinner" -> blood_thinner).
        """
        keys: Set[str] = set()
        for raw in medications or []:
            normalized = (raw or "").strip().lower()
            if not normalized:
                continue

            med = self._med_index.get(normalized)
            if med is not None:
                keys.update(med.interaction_keys)
                continue

            tokens = _tokens(normalized)
            for token in tokens:
                token_med = self._med_index.get(token)
                if token_med is not None:
                    keys.update(token_med.interaction_keys)

            joined = "_".join(tokens)
            if joined in self._interaction_keys:
                keys.add(joined)
            keys.update(t for t in tokens if t in self._interaction_keys)
        return keys

    def interactions_for(self, supplement_name: str) -> Tuple[DrugInteractionRecord, ...]:
        return self._interactions.get(supplement_name, ())

    def check_interactions(self, supplement_id: str, keys: Iterable[str]) -> InteractionDecision:
        """Total decision: clear, keep_with_warnings or remove for one supplement."""
        supp = self._by_id.get(supplement_id)
        if supp is None:
            return InteractionDecision(kind=DecisionKind.CLEAR)

        keys = set(keys or ())
        matches = [r for r in self.interactions_for(supp.name) if r.drug_or_class in keys]
        if not matches:
            return InteractionDecision(kind=DecisionKind.CLEAR)

        warnings = [InteractionWarning.from_record(r) for r in matches]
        if any(r.severity.requires_removal for r in matches):
            return InteractionDecision(kind=DecisionKind.REMOVE, interactions=warnings)
        return InteractionDecision(kind=DecisionKind.KEEP_WITH_WARNINGS, interactions=warnings)

    def absolute_contraindications(self) -> List[Contraindication]:
        return [c for c in self._contraindications if c.severity == ContraindicationSeverity.ABSOLUTE]

    def contraindications_for(self, supplement_name: str) -> List[Contraindication]:
        return [c for c in self._contraindications if c.supplement_name == supplement_name]

    # --- Medications ---

    def search_medications(self, query: str, limit: int = 20) -> List[Medication]:
        q = (query or "").strip().lower()
        if not q:
            return []
        hits = [
            m for m in self._medications
            if q in m.name.lower() or (m.generic_name and q in m.generic_name.lower())
        ]
        # prefix matches first, then alphabetical
        hits.sort(key=lambda m: (not m.name.lower().startswith(q), m.name.lower()))
        return hits[:limit]

    def medication(self, name: str) -> Optional[Medication]:
        return self._med_index.get((name or "").strip().lower())

    # --- Construction from knowledge-base snapshots ---

    @classmethod
    def from_snapshot(cls, snapshot: dict) -> "Catalog":
        """
        Build a catalog from a knowledge-base snapshot: a dict of table name → rows
        as returned by the remote knowledge base (supplements, supplement_goal_map,
        drug_interactions, contraindications, synergistic_pairings).

        Medication list, allergy/pregnancy/diet tables and why-phrases are not
        stored remotely and come from the bundled knowledge base.
        """
        if not isinstance(snapshot, dict):
            raise CatalogError("Snapshot must be a mapping of table name to rows")

        rows = snapshot.get("supplements") or []
        if not rows:
            raise CatalogError("Snapshot has no supplements")

        id_to_name: Dict[str, str] = {}
        for row in rows:
            if not row.get("id") or not row.get("name"):
                raise CatalogError(f"Supplement row missing id or name: {row!r}")
            id_to_name[str(row["id"])] = row["name"]

        def name_for(row: dict) -> str:
            sid = str(row.get("supplement_id"))
            if sid not in id_to_name:
                raise CatalogError(f"Row references unknown supplement_id {sid}")
            return id_to_name[sid]

        interactions = []
        for row in snapshot.get("drug_interactions") or []:
            interactions.append(DrugInteractionRecord(
                supplement_name=name_for(row),
                drug_or_class=str(row.get("drug_or_class", "")).strip().lower(),
                interaction_type=row.get("interaction_type") or "unspecified",
                severity=_enum(InteractionSeverity, row.get("severity") or "moderate", "interaction severity"),
                mechanism=row.get("mechanism") or "",
                action=_enum(InteractionAction, row.get("action") or "other", "interaction action"),
            ))

        contraindications = []
        for row in snapshot.get("contraindications") or []:
            contraindications.append(Contraindication(
                supplement_name=name_for(row),
                condition=row.get("condition", ""),
                severity=_enum(ContraindicationSeverity, row.get("severity") or "relative", "contraindication severity"),
                rationale=row.get("rationale") or "",
            ))

        goal_entries = []
        benefits: Dict[str, List[str]] = {}
        for row in snapshot.get("supplement_goal_map") or []:
            try:
                weight = int(row.get("weight"))
            except (TypeError, ValueError):
                raise CatalogError(f"Non-numeric goal weight: {row.get('weight')!r}")
            name = name_for(row)
            goal_entries.append(GoalSupplementEntry(goal=row.get("goal"), name=name, weight=weight))
            benefits.setdefault(name, []).append(row.get("goal"))

        synergies: Dict[str, List[Synergy]] = {}
        for row in snapshot.get("synergistic_pairings") or []:
            synergies.setdefault(name_for(row), []).append(
                Synergy(partner=row.get("partner_name", ""), mechanism=row.get("mechanism") or "")
            )

        supplements = []
        for row in rows:
            name = row["name"]
            low, high = row.get("dose_range_low"), row.get("dose_range_high")
            default_dose = row.get("default_dose") or ""
            number = _FIRST_NUMBER.search(default_dose)
            dose_mg = row.get("recommended_dosage_mg")
            if dose_mg is None:
                dose_mg = float(number.group()) if number else 0.0
            display_range = row.get("common_dosage_range") or (f"{low}-{high}" if low and high else default_dose)
            confidence = row.get("synthesis_confidence") or "moderate"
            supplements.append(SupplementDefinition(
                id=str(row["id"]),
                name=name,
                category=_enum(SupplementCategory, row.get("category"), "supplement category"),
                common_dosage_range=display_range,
                recommended_dosage_mg=float(dose_mg),
                recommended_timing=_enum_or_default(
                    SupplementTiming, row.get("time_of_day") or "morning", SupplementTiming.MORNING, "timing"
                ),
                benefits=tuple(benefits.get(name, ())),
                contraindications=tuple(c.condition for c in contraindications if c.supplement_name == name),
                drug_interactions=tuple(r.drug_or_class for r in interactions if r.supplement_name == name),
                notes=row.get("timing_rationale") or "",
                dosage_rationale=row.get("primary_action") or "",
                expected_timeline=row.get("onset_description") or "",
                what_to_look_for=row.get("timing_relative_notes") or "",
                form_and_bioavailability=row.get("default_form") or "",
                evidence_level=_enum_or_default(
                    EvidenceLevel,
                    _CONFIDENCE_TO_EVIDENCE.get(confidence, confidence),
                    EvidenceLevel.MODERATE,
                    "evidence level",
                ),
            ))

        return cls(
            supplements=supplements,
            goal_entries=goal_entries,
            synergies=synergies,
            interactions=interactions,
            contraindications=contraindications,
            **_bundled_tables(),
        )


def _bundled_tables() -> dict:
    return dict(
        medications=[
            Medication(name=name, category=category, generic_name=generic, interaction_keys=tuple(keys))
            for name, category, generic, keys in kb.MEDICATIONS
        ],
        allergy_exclusions=kb.ALLERGY_EXCLUSIONS,
        pregnancy_exclusions=kb.PREGNANCY_EXCLUSIONS,
        diet_additions=kb.DIET_ADDITIONS,
        why_phrases=kb.WHY_PHRASES,
        diet_addition_reasons=kb.DIET_ADDITION_REASONS,
        category_labels=kb.CATEGORY_LABELS,
    )


def _supplement_from_row(row: dict) -> SupplementDefinition:
    return SupplementDefinition(
        id=row["id"],
        name=row["name"],
        category=_enum(SupplementCategory, row["category"], "supplement category"),
        common_dosage_range=row["common_dosage_range"],
        recommended_dosage_mg=float(row["recommended_dosage_mg"]),
        recommended_timing=_enum(SupplementTiming, row["recommended_timing"], "timing"),
        benefits=tuple(_enum(HealthGoal, b, "goal key").value for b in row.get("benefits", [])),
        contraindications=tuple(row.get("contraindications", [])),
        drug_interactions=tuple(row.get("drug_interactions", [])),
        notes=row.get("notes", ""),
        dosage_rationale=row.get("dosage_rationale", ""),
        expected_timeline=row.get("expected_timeline", ""),
        what_to_look_for=row.get("what_to_look_for", ""),
        form_and_bioavailability=row.get("form_and_bioavailability", ""),
        evidence_level=_enum(EvidenceLevel, row.get("evidence_level", "moderate"), "evidence level"),
    )


def build_static_catalog() -> Catalog:
    """Catalog built from the bundled seed tables in tonic.knowledge_base."""
    return Catalog(
        supplements=[_supplement_from_row(row) for row in kb.SUPPLEMENTS],
        goal_entries=[
            GoalSupplementEntry(goal=goal, name=name, weight=weight)
            for goal, entries in kb.GOAL_SUPPLEMENT_MAP.items()
            for name, weight in entries
        ],
        synergies={
            name: [Synergy(partner=partner, mechanism=mechanism) for partner, mechanism in pairs]
            for name, pairs in kb.SYNERGIES.items()
        },
        interactions=[
            DrugInteractionRecord(
                supplement_name=supp,
                drug_or_class=key,
                interaction_type=itype,
                severity=_enum(InteractionSeverity, severity, "interaction severity"),
                mechanism=mechanism,
                action=_enum(InteractionAction, action, "interaction action"),
            )
            for supp, key, itype, severity, action, mechanism in kb.DRUG_INTERACTIONS
        ],
        contraindications=[
            Contraindication(
                supplement_name=supp,
                condition=condition,
                severity=_enum(ContraindicationSeverity, severity, "contraindication severity"),
                rationale=rationale,
            )
            for supp, condition, severity, rationale in kb.CONTRAINDICATIONS
        ],
        **_bundled_tables(),
    )


def catalog_to_snapshot(catalog: Catalog) -> dict:
    """Inverse of Catalog.from_snapshot for the tables the remote knowledge base owns."""
    supplements, goal_map, interactions, contraindications, pairings = [], [], [], [], []
    evidence_to_confidence = {v: k for k, v in _CONFIDENCE_TO_EVIDENCE.items()}
    for supp in catalog.all_supplements():
        supplements.append({
            "id": supp.id,
            "name": supp.name,
            "category": supp.category.value,
            "default_dose": f"{supp.recommended_dosage_mg:g}",
            "recommended_dosage_mg": supp.recommended_dosage_mg,
            "common_dosage_range": supp.common_dosage_range,
            "time_of_day": supp.recommended_timing.value,
            "synthesis_confidence": evidence_to_confidence[supp.evidence_level.value],
            "primary_action": supp.dosage_rationale,
            "default_form": supp.form_and_bioavailability,
            "onset_description": supp.expected_timeline,
            "timing_rationale": supp.notes,
            "timing_relative_notes": supp.what_to_look_for,
        })
        for goal in HealthGoal:
            weight = catalog.weight(supp.name, goal)
            if weight:
                goal_map.append({"supplement_id": supp.id, "goal": goal.value, "weight": str(weight)})
        for r in catalog.interactions_for(supp.name):
            interactions.append({
                "supplement_id": supp.id,
                "drug_or_class": r.drug_or_class,
                "interaction_type": r.interaction_type,
                "severity": r.severity.value,
                "mechanism": r.mechanism,
                "action": r.action.value,
            })
        for c in catalog.contraindications_for(supp.name):
            contraindications.append({
                "supplement_id": supp.id,
                "condition": c.condition,
                "severity": c.severity.value,
                "rationale": c.rationale,
            })
        for s in catalog.synergies(supp.name):
            pairings.append({"supplement_id": supp.id, "partner_name": s.partner, "mechanism": s.mechanism})
    return {
        "supplements": supplements,
        "supplement_goal_map": goal_map,
        "drug_interactions": interactions,
        "contraindications": contraindications,
        "synergistic_pairings": pairings,
    }
