from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import List, Optional
from dotenv import load_dotenv
import logging

load_dotenv()

from tonic.catalog_loader import load_catalog
from tonic.serialization import item_to_dict, plan_from_dict, plan_to_dict, profile_from_dict
from tonic.supplement_engine import PlanningError, RecommendationEngine

app = FastAPI()

# -----------------------------
# Middleware
# -----------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # replace "*" with your frontend URL in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

logger = logging.getLogger("uvicorn.error")

catalog = load_catalog()
engine = RecommendationEngine(catalog)


@app.get("/")
@app.head("/")
def root():
    return {"message": "Welcome to the Tonic supplement API"}


# -----------------------------
# Request models
# -----------------------------
class ProfileInput(BaseModel):
    user_id: Optional[str] = None
    age: Optional[int] = None
    biological_sex: Optional[str] = None
    is_pregnant: Optional[bool] = False
    is_breastfeeding: Optional[bool] = False
    height_inches: Optional[int] = None
    weight_lbs: Optional[int] = None
    health_goals: List[str] = Field(default_factory=list)
    diet_type: Optional[str] = None
    exercise_frequency: Optional[str] = None
    coffee_cups_daily: Optional[int] = 0
    tea_cups_daily: Optional[int] = 0
    energy_drinks_daily: Optional[int] = 0
    alcohol_weekly: Optional[str] = None
    stress_level: Optional[str] = None
    baseline_sleep: Optional[int] = None
    medications: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)
    current_supplements: List[str] = Field(default_factory=list)


class AddSupplementInput(BaseModel):
    profile: ProfileInput
    supplement_name: str
    plan: Optional[dict] = None


# -----------------------------
# Input normalization
# -----------------------------
def normalize_sex(raw: Optional[str]) -> str:
    value = (raw or "").strip().lower()
    if value in ["f", "female", "woman", "girl"]:
        return "female"
    if value in ["m", "male", "man", "boy"]:
        return "male"
    if value in ["other", "non-binary", "nonbinary"]:
        return "other"
    return "prefer_not_to_say"


def normalize_diet(raw: Optional[str]) -> str:
    value = (raw or "omnivore").strip().lower().replace("-", "_").replace(" ", "_")
    if value in ["plant_based", "plantbased"]:
        return "vegan"
    return value


def normalize_goal(raw: str) -> str:
    return raw.strip().lower().replace("-", "_").replace(" ", "_").replace("&", "").replace("__", "_")


def to_profile(user_input: ProfileInput):
    data = user_input.dict()
    data["sex"] = normalize_sex(data.pop("biological_sex"))
    data["diet_type"] = normalize_diet(data.get("diet_type"))
    data["health_goals"] = [normalize_goal(g) for g in data.get("health_goals") or []]
    try:
        return profile_from_dict(data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"Invalid profile: {e}")


# -----------------------------
# Catalog endpoints
# -----------------------------
@app.get("/supplements")
def list_supplements():
    return {
        "categories": [
            {
                "key": key,
                "label": catalog.category_label(key),
                "supplements": [
                    {
                        "id": s.id,
                        "name": s.name,
                        "dosage_range": s.common_dosage_range,
                        "timing": s.recommended_timing.value,
                        "evidence_level": s.evidence_level.label,
                    }
                    for s in members
                ],
            }
            for key, members in catalog.supplements_by_category().items()
        ]
    }


@app.get("/medications/search")
def search_medications(q: str = Query("", max_length=100)):
    return {
        "results": [
            {"name": m.name, "category": m.category, "generic_name": m.generic_name}
            for m in catalog.search_medications(q)
        ]
    }


# -----------------------------
# Plan endpoints
# -----------------------------
@app.post("/plan", response_model=dict)
def create_plan(user_input: ProfileInput):
    user = to_profile(user_input)
    try:
        plan = engine.generate_plan(user)
        logger.info(f"Generated plan with {len(plan.items)} supplements")
        return plan_to_dict(plan)
    except Exception as e:
        logger.error(f"Error in /plan endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500,
                            detail="Internal Server Error. Please check your input and try again.")


@app.post("/plan/add", response_model=dict)
def add_to_plan(body: AddSupplementInput):
    user = to_profile(body.profile)
    try:
        plan = plan_from_dict(body.plan)
    except (KeyError, TypeError, ValueError) as e:
        raise HTTPException(status_code=422, detail=f"Invalid plan: {e}")
    try:
        item = engine.add_supplement_by_name(body.supplement_name, user, plan)
        return {"item": item_to_dict(item), "plan": plan_to_dict(plan)}
    except PlanningError as e:
        logger.warning(f"Plan edit rejected: {e}")
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error in /plan/add endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500,
                            detail="Internal Server Error. Please check your input and try again.")
