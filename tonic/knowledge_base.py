# knowledge_base.py
"""
Seed tables for the supplement catalog.

These are plain data. `tonic.catalog.build_static_catalog()` validates them and
builds the read-only Catalog the engine works from; nothing in the engine
reads this module directly.
"""

from typing import Dict, List, Tuple

# Goal → [(supplement, evidence weight)]
# 3 = meta-analyses or 3+ RCTs, 2 = limited RCTs or mixed results, 1 = mechanistic/preclinical
GOAL_SUPPLEMENT_MAP: Dict[str, List[Tuple[str, int]]] = {
    "sleep": [
        ("Magnesium Glycinate", 3),
        ("L-Theanine", 2),
        ("Melatonin", 2),
        ("Tart Cherry Extract", 1),
    ],
    "energy": [
        ("Vitamin B Complex", 3),
        ("CoQ10", 2),
        ("Iron", 2),
        ("Vitamin D3 + K2", 2),
        ("Rhodiola Rosea", 2),
    ],
    "focus": [
        ("Omega-3 (EPA/DHA)", 3),
        ("L-Theanine", 2),
        ("Lion's Mane", 2),
        ("Vitamin B Complex", 1),
    ],
    "gut_health": [
        ("Probiotics", 3),
        ("Berberine", 2),
        ("Collagen Peptides", 1),
        ("Zinc", 1),
    ],
    "immune_support": [
        ("Vitamin D3 + K2", 3),
        ("Vitamin C", 2),
        ("Zinc", 2),
        ("NAC", 1),
    ],
    "stress_anxiety": [
        ("Magnesium Glycinate", 3),
        ("Ashwagandha KSM-66", 2),
        ("L-Theanine", 2),
        ("Rhodiola Rosea", 2),
    ],
    "muscle_recovery": [
        ("Creatine Monohydrate", 3),
        ("Magnesium Glycinate", 2),
        ("Omega-3 (EPA/DHA)", 2),
        ("Vitamin D3 + K2", 2),
        ("Tart Cherry Extract", 1),
    ],
    "skin_hair_nails": [
        ("Collagen Peptides", 3),
        ("Biotin", 2),
        ("Vitamin C", 1),
        ("Zinc", 1),
    ],
    "longevity": [
        ("Omega-3 (EPA/DHA)", 3),
        ("Vitamin D3 + K2", 2),
        ("CoQ10", 2),
        ("NAC", 2),
    ],
    "heart_health": [
        ("CoQ10", 3),
        ("Omega-3 (EPA/DHA)", 3),
        ("Magnesium Glycinate", 2),
        ("Vitamin D3 + K2", 2),
        ("Berberine", 1),
    ],
}

SUPPLEMENTS: List[dict] = [
    {
        "id": "00000001-0000-0000-0000-000000000001",
        "name": "Magnesium Glycinate",
        "category": "mineral",
        "common_dosage_range": "200-400mg",
        "recommended_dosage_mg": 400,
        "recommended_timing": "evening",
        "benefits": ["sleep", "stress_anxiety", "muscle_recovery", "heart_health"],
        "drug_interactions": ["blood_pressure", "levothyroxine"],
        "notes": "Best absorbed form of magnesium. Take in the evening for sleep support.",
        "dosage_rationale": "400mg is the upper end of the clinically studied range, chosen for combined sleep and recovery support.",
        "expected_timeline": "Calming effects can be felt within 30-60 minutes. Cumulative benefits for sleep quality and muscle recovery build over 1-2 weeks.",
        "what_to_look_for": "Better sleep onset and fewer nighttime wake-ups{stress_note}. Reduced muscle tension after workouts{exercise_note}.",
        "form_and_bioavailability": "Glycinate chelate, one of the most bioavailable forms of magnesium with minimal GI side effects compared to oxide or citrate.",
        "evidence_level": "strong",
    },
    {
        "id": "00000001-0000-0000-0000-000000000002",
        "name": "Vitamin D3 + K2",
        "category": "vitamin",
        "common_dosage_range": "2000-5000 IU",
        "recommended_dosage_mg": 2000,
        "recommended_timing": "morning",
        "benefits": ["immune_support", "energy", "longevity", "heart_health"],
        "drug_interactions": ["warfarin"],
        "notes": "K2 ensures calcium goes to bones, not arteries. Take with fat-containing food.",
        "dosage_rationale": "2000 IU is a safe daily maintenance dose that brings most adults into the optimal 40-60 ng/mL range.",
        "expected_timeline": "Blood levels rise steadily over 4-8 weeks. Energy and mood benefits often noticed within 2-3 weeks.",
        "what_to_look_for": "Improved energy levels and a general sense of vitality. Better resilience during cold and flu season.",
        "form_and_bioavailability": "D3 (cholecalciferol) with K2 (MK-7). D3 is 87% more effective than D2 at raising serum levels, and K2 directs calcium to bones. Take with a fat-containing meal.",
        "evidence_level": "strong",
    },
    {
        "id": "00000001-0000-0000-0000-000000000003",
        "name": "Omega-3 (EPA/DHA)",
        "category": "fatty_acid",
        "common_dosage_range": "1000-2000mg",
        "recommended_dosage_mg": 1000,
        "recommended_timing": "morning",
        "benefits": ["focus", "longevity", "muscle_recovery", "heart_health"],
        "drug_interactions": ["warfarin", "blood_thinner", "ssri"],
        "notes": "Look for high EPA+DHA content. Take with food to reduce fishy aftertaste.",
        "dosage_rationale": "1000mg combined EPA/DHA is the minimum effective dose shown in cardiovascular and cognitive studies.",
        "expected_timeline": "Anti-inflammatory benefits begin within 1-2 weeks. Cognitive and cardiovascular improvements build over 8-12 weeks of consistent use.",
        "what_to_look_for": "Improved mental clarity and focus{caffeine_note}. Reduced joint stiffness after exercise{exercise_note}.",
        "form_and_bioavailability": "Triglyceride-form fish oil, about 70% better absorbed than the ethyl ester form. Take with a meal containing fat.",
        "evidence_level": "strong",
    },
    {
        "id": "00000001-0000-0000-0000-000000000004",
        "name": "Ashwagandha KSM-66",
        "category": "adaptogen",
        "common_dosage_range": "300-600mg",
        "recommended_dosage_mg": 600,
        "recommended_timing": "evening",
        "benefits": ["stress_anxiety", "energy", "sleep"],
        "contraindications": ["thyroid_condition", "pregnancy"],
        "drug_interactions": ["levothyroxine", "sedative", "immunosuppressant"],
        "notes": "KSM-66 is the most clinically studied extract. Effects build over 2-4 weeks.",
        "dosage_rationale": "600mg is the full clinically studied dose of KSM-66, shown to reduce cortisol by up to 30%.",
        "expected_timeline": "Some calming effects within the first few days. Significant stress reduction and improved sleep quality develop over 2-4 weeks of daily use.",
        "what_to_look_for": "A noticeable drop in baseline anxiety and reactivity to stressors{stress_note}. Improved sleep quality and morning alertness.",
        "form_and_bioavailability": "KSM-66 root extract, a full-spectrum extraction standardized to 5% withanolides for consistent potency.",
        "evidence_level": "moderate",
    },
    {
        "id": "00000001-0000-0000-0000-000000000005",
        "name": "L-Theanine",
        "category": "amino_acid",
        "common_dosage_range": "100-200mg",
        "recommended_dosage_mg": 200,
        "recommended_timing": "morning",
        "benefits": ["focus", "sleep", "stress_anxiety"],
        "drug_interactions": ["blood_pressure"],
        "notes": "Found naturally in green tea. Promotes calm focus without drowsiness.",
        "dosage_rationale": "200mg is the clinically studied dose for cognitive calm without sedation.",
        "expected_timeline": "Most people notice calming effects within 30-60 minutes. Cumulative benefits build over 1-2 weeks.",
        "what_to_look_for": "A sense of calm focus without drowsiness{caffeine_note}. Reduced mental chatter and easier concentration{stress_note}.",
        "form_and_bioavailability": "Free-form amino acid that crosses the blood-brain barrier within 30 minutes and promotes alpha brain wave activity.",
        "evidence_level": "moderate",
    },
    {
        "id": "00000001-0000-0000-0000-000000000006",
        "name": "Vitamin B Complex",
        "category": "vitamin",
        "common_dosage_range": "1x daily",
        "recommended_dosage_mg": 0,
        "recommended_timing": "morning",
        "benefits": ["energy", "focus"],
        "notes": "Essential for energy metabolism. Take in morning as it can be energizing.",
        "dosage_rationale": "Full-spectrum B complex at 100% DV covers all 8 essential B vitamins to support energy metabolism and nervous system function.",
        "expected_timeline": "Energy improvements often felt within the first week. Full benefits for mood and cognitive function build over 2-4 weeks.",
        "what_to_look_for": "More consistent energy levels throughout the day. Improved mental clarity and reduced afternoon fatigue{caffeine_note}.",
        "form_and_bioavailability": "Methylated forms (methylfolate, methylcobalamin) are readily usable without conversion. Water-soluble, so excess is safely excreted.",
        "evidence_level": "strong",
    },
    {
        "id": "00000001-0000-0000-0000-000000000007",
        "name": "Probiotics",
        "category": "probiotic",
        "common_dosage_range": "10-50B CFU",
        "recommended_dosage_mg": 0,
        "recommended_timing": "empty_stomach",
        "benefits": ["gut_health", "immune_support"],
        "notes": "Take on empty stomach for best survival rate through digestive tract.",
        "dosage_rationale": "Multi-strain formula with 30B CFU, the clinically effective range for gut microbiome support and immune modulation.",
        "expected_timeline": "Digestive improvements often noticed within 1-2 weeks. Full microbiome rebalancing takes 4-8 weeks of consistent use.",
        "what_to_look_for": "Reduced bloating and more regular digestion. Improved immune resilience over time.",
        "form_and_bioavailability": "Delayed-release capsule that protects live cultures from stomach acid on the way to the intestines.",
        "evidence_level": "strong",
    },
    {
        "id": "00000001-0000-0000-0000-000000000008",
        "name": "Zinc",
        "category": "mineral",
        "common_dosage_range": "15-30mg",
        "recommended_dosage_mg": 25,
        "recommended_timing": "evening",
        "benefits": ["immune_support", "skin_hair_nails", "gut_health"],
        "drug_interactions": ["levothyroxine"],
        "notes": "Take with food to avoid nausea. Don't take with iron or calcium.",
        "dosage_rationale": "25mg sits within the therapeutic range for immune support without risking copper depletion at higher doses.",
        "expected_timeline": "Immune benefits begin within 1-2 weeks. Skin and hair improvements develop gradually over 4-8 weeks.",
        "what_to_look_for": "Fewer and shorter colds. Improved skin clarity and wound healing over time.",
        "form_and_bioavailability": "Zinc picolinate, with roughly 20% better absorption than zinc gluconate. Take with food to minimize nausea.",
        "evidence_level": "moderate",
    },
    {
        "id": "00000001-0000-0000-0000-000000000009",
        "name": "Vitamin C",
        "category": "vitamin",
        "common_dosage_range": "500-1000mg",
        "recommended_dosage_mg": 1000,
        "recommended_timing": "morning",
        "benefits": ["immune_support", "skin_hair_nails"],
        "drug_interactions": ["immunosuppressant"],
        "notes": "Enhances iron absorption. Split doses for better absorption.",
        "dosage_rationale": "1000mg is above the RDA to support collagen synthesis and antioxidant protection under daily stress.",
        "expected_timeline": "Immune support begins immediately. Skin brightness and collagen benefits build over 4-8 weeks.",
        "what_to_look_for": "Improved recovery from minor illnesses. Brighter, more even skin tone over time{stress_note}.",
        "form_and_bioavailability": "Buffered ascorbic acid, gentler on the stomach than pure ascorbic acid. Splitting into two doses improves utilization.",
        "evidence_level": "strong",
    },
    {
        "id": "00000001-0000-0000-0000-000000000010",
        "name": "CoQ10",
        "category": "coenzyme",
        "common_dosage_range": "100-200mg",
        "recommended_dosage_mg": 200,
        "recommended_timing": "morning",
        "benefits": ["energy", "longevity", "heart_health"],
        "drug_interactions": ["blood_pressure", "statin", "warfarin"],
        "notes": "Ubiquinol form is better absorbed. Recommended alongside statins.",
        "dosage_rationale": "200mg is the dose used in major cardiovascular and energy studies, providing robust mitochondrial support.",
        "expected_timeline": "Energy improvements typically noticed within 2-4 weeks. Cardiovascular benefits build over 4-12 weeks of consistent use.",
        "what_to_look_for": "More sustained energy throughout the day, especially during physical activity{exercise_note}. Improved exercise recovery.",
        "form_and_bioavailability": "Ubiquinol (reduced form), 2-3x better absorbed than ubiquinone. Fat-soluble; take with a meal.",
        "evidence_level": "strong",
    },
    {
        "id": "00000001-0000-0000-0000-000000000011",
        "name": "Creatine Monohydrate",
        "category": "amino_acid",
        "common_dosage_range": "3-5g",
        "recommended_dosage_mg": 5000,
        "recommended_timing": "morning",
        "benefits": ["muscle_recovery", "focus"],
        "notes": "Most researched supplement. No loading phase needed at 5g/day.",
        "dosage_rationale": "5g is the standard clinically validated daily dose. No loading phase necessary; saturation occurs within 3-4 weeks.",
        "expected_timeline": "Muscle saturation takes 3-4 weeks at 5g/day. Strength and cognitive benefits become noticeable once stores are full.",
        "what_to_look_for": "Improved strength and power output during workouts{exercise_note}. Enhanced mental sharpness, especially under fatigue or sleep debt.",
        "form_and_bioavailability": "Creatine monohydrate, the most studied form with over 500 clinical trials and near-complete bioavailability.",
        "evidence_level": "strong",
    },
    {
        "id": "00000001-0000-0000-0000-000000000012",
        "name": "Collagen Peptides",
        "category": "protein",
        "common_dosage_range": "10-15g",
        "recommended_dosage_mg": 10000,
        "recommended_timing": "morning",
        "benefits": ["skin_hair_nails", "gut_health"],
        "notes": "Types I and III for skin/hair. Can mix into coffee or smoothie.",
        "dosage_rationale": "10g is the dose shown in clinical studies to improve skin elasticity and reduce wrinkle depth.",
        "expected_timeline": "Nail strength improves within 2-4 weeks. Skin hydration and elasticity benefits typically visible by 6-8 weeks.",
        "what_to_look_for": "Stronger nails and improved skin hydration. Hair thickness may improve with consistent use over 3+ months.",
        "form_and_bioavailability": "Hydrolyzed peptides (Types I & III) with 90%+ absorption. Pairs with Vitamin C for collagen synthesis.",
        "evidence_level": "moderate",
    },
    {
        "id": "00000001-0000-0000-0000-000000000013",
        "name": "Lion's Mane",
        "category": "mushroom",
        "common_dosage_range": "500-1000mg",
        "recommended_dosage_mg": 1000,
        "recommended_timing": "morning",
        "benefits": ["focus", "longevity"],
        "drug_interactions": ["blood_thinner", "diabetes"],
        "notes": "Supports nerve growth factor. Effects build over several weeks.",
        "dosage_rationale": "1000mg is the dose used in cognitive performance studies, providing meaningful nerve growth factor stimulation.",
        "expected_timeline": "Subtle cognitive improvements may begin within 2 weeks. Significant benefits for focus and memory build over 4-8 weeks.",
        "what_to_look_for": "Improved recall and mental clarity{caffeine_note}. Easier sustained concentration during complex tasks.",
        "form_and_bioavailability": "Fruiting body extract, dual-extracted (water + alcohol) and standardized for hericenones and erinacines.",
        "evidence_level": "emerging",
    },
    {
        "id": "00000001-0000-0000-0000-000000000014",
        "name": "Rhodiola Rosea",
        "category": "adaptogen",
        "common_dosage_range": "200-400mg",
        "recommended_dosage_mg": 400,
        "recommended_timing": "morning",
        "benefits": ["energy", "stress_anxiety"],
        "drug_interactions": ["ssri"],
        "notes": "Best taken in the morning. Look for 3% rosavins / 1% salidroside.",
        "dosage_rationale": "400mg is the upper clinical dose, standardized to 3% rosavins and 1% salidroside.",
        "expected_timeline": "Anti-fatigue effects often felt within the first few days. Full adaptogenic benefits develop over 2-4 weeks.",
        "what_to_look_for": "Reduced mental fatigue and improved endurance{exercise_note}. Better stress resilience without jitteriness{stress_note}.",
        "form_and_bioavailability": "Standardized root extract (3% rosavins, 1% salidroside), the ratio used in clinical trials. Best on an empty stomach in the morning.",
        "evidence_level": "moderate",
    },
    {
        "id": "00000001-0000-0000-0000-000000000015",
        "name": "Melatonin",
        "category": "hormone",
        "common_dosage_range": "0.5-3mg",
        "recommended_dosage_mg": 1,
        "recommended_timing": "bedtime",
        "benefits": ["sleep"],
        "drug_interactions": ["sedative"],
        "notes": "Start low (0.5mg). Take 30 min before bed. Less is often more.",
        "dosage_rationale": "1mg is a physiologically appropriate dose that mimics natural production. Higher doses often cause grogginess without improving sleep.",
        "expected_timeline": "Sleep onset improvements typically felt the first night. Best used short-term or cyclically rather than continuously.",
        "what_to_look_for": "Faster time to fall asleep and more consistent sleep onset timing. If you feel groggy in the morning, try reducing to 0.5mg.",
        "form_and_bioavailability": "Sublingual tablet that absorbs through the oral mucosa for faster onset (15-20 minutes vs. 45 minutes for swallowed tablets).",
        "evidence_level": "strong",
    },
    {
        "id": "00000001-0000-0000-0000-000000000016",
        "name": "Biotin",
        "category": "vitamin",
        "common_dosage_range": "2500-5000mcg",
        "recommended_dosage_mg": 5,
        "recommended_timing": "morning",
        "benefits": ["skin_hair_nails"],
        "notes": "Can interfere with lab tests. Inform doctor before blood work.",
        "dosage_rationale": "5000mcg is the dose used in hair and nail strengthening studies. Above dietary needs but safe as a water-soluble vitamin.",
        "expected_timeline": "Nail improvements typically visible within 3-4 weeks. Hair thickness and growth benefits require 3-6 months of consistent use.",
        "what_to_look_for": "Stronger, less brittle nails first. Hair shedding may decrease over time. Inform your doctor before blood work, as biotin can interfere with lab results.",
        "form_and_bioavailability": "D-biotin, the naturally occurring active form. Water-soluble with high oral bioavailability.",
        "evidence_level": "moderate",
    },
    {
        "id": "00000001-0000-0000-0000-000000000017",
        "name": "Iron",
        "category": "mineral",
        "common_dosage_range": "18-27mg",
        "recommended_dosage_mg": 18,
        "recommended_timing": "empty_stomach",
        "benefits": ["energy"],
        "contraindications": ["hemochromatosis"],
        "drug_interactions": ["levothyroxine", "acid_reducer"],
        "notes": "Take with Vitamin C to enhance absorption. Can cause GI distress.",
        "dosage_rationale": "18mg is the RDA for adult women.",
        "expected_timeline": "If iron-deficient, energy improvements can be felt within 2-4 weeks. Ferritin levels take 3-6 months to fully normalize.",
        "what_to_look_for": "Improved energy and reduced fatigue, especially during afternoon slumps{exercise_note}. Less shortness of breath during physical activity.",
        "form_and_bioavailability": "Iron bisglycinate, 4x better absorbed than ferrous sulfate with fewer GI side effects. Take on an empty stomach with Vitamin C.",
        "evidence_level": "strong",
    },
    {
        "id": "00000001-0000-0000-0000-000000000018",
        "name": "NAC",
        "category": "amino_acid",
        "common_dosage_range": "600-1200mg",
        "recommended_dosage_mg": 600,
        "recommended_timing": "morning",
        "benefits": ["immune_support", "longevity"],
        "drug_interactions": ["immunosuppressant", "nitroglycerin"],
        "notes": "Precursor to glutathione. Take on empty stomach for best absorption.",
        "dosage_rationale": "600mg is the standard clinical dose for glutathione support and antioxidant defense.",
        "expected_timeline": "Glutathione levels begin rising within 1-2 weeks. Full antioxidant and respiratory benefits develop over 4-8 weeks.",
        "what_to_look_for": "Improved respiratory health and immune resilience. A general sense of reduced oxidative burden{exercise_note}.",
        "form_and_bioavailability": "N-Acetyl Cysteine, an acetylated form of cysteine with improved oral bioavailability that feeds glutathione synthesis.",
        "evidence_level": "moderate",
    },
    {
        "id": "00000001-0000-0000-0000-000000000019",
        "name": "Berberine",
        "category": "plant_extract",
        "common_dosage_range": "500mg",
        "recommended_dosage_mg": 500,
        "recommended_timing": "with_food",
        "benefits": ["gut_health", "longevity", "heart_health"],
        "contraindications": ["pregnancy"],
        "drug_interactions": ["metformin", "diabetes"],
        "notes": "Take with meals. May lower blood sugar, so monitor if diabetic.",
        "dosage_rationale": "500mg is the dose used in metabolic and gut health studies, taken with meals to improve tolerability.",
        "expected_timeline": "Digestive improvements often noticed within 1-2 weeks. Metabolic and cardiovascular benefits build over 8-12 weeks.",
        "what_to_look_for": "Improved digestion and more stable energy after meals. Better fasting glucose readings if you track them.",
        "form_and_bioavailability": "Berberine HCl, the most studied salt form. Bioavailability is naturally low but improves when taken with a meal.",
        "evidence_level": "moderate",
    },
    {
        "id": "00000001-0000-0000-0000-000000000020",
        "name": "Tart Cherry Extract",
        "category": "fruit_extract",
        "common_dosage_range": "500-1000mg",
        "recommended_dosage_mg": 500,
        "recommended_timing": "evening",
        "benefits": ["sleep", "muscle_recovery"],
        "notes": "Natural source of melatonin and anti-inflammatory compounds.",
        "dosage_rationale": "500mg is roughly equivalent to 100 tart cherries, providing natural melatonin and anthocyanins.",
        "expected_timeline": "Sleep onset improvements often felt within the first few days. Recovery benefits build over 1-2 weeks of consistent use.",
        "what_to_look_for": "Easier sleep onset and improved sleep quality. Reduced muscle soreness after exercise{exercise_note}.",
        "form_and_bioavailability": "Concentrated Montmorency cherry extract standardized for anthocyanins. Capsules dose more consistently than juice.",
        "evidence_level": "emerging",
    },
]

# supplement → [(partner, mechanism)]; "caffeine" is matched against the profile, not the plan
SYNERGIES: Dict[str, List[Tuple[str, str]]] = {
    "L-Theanine": [("caffeine", "promotes calm, focused energy without jitters")],
    "Vitamin C": [
        ("Iron", "enhances iron absorption by up to 6x"),
        ("Collagen Peptides", "essential cofactor for collagen synthesis"),
        ("NAC", "supports glutathione production"),
    ],
    "Iron": [("Vitamin C", "enhances iron absorption by up to 6x")],
    "Vitamin D3 + K2": [("Magnesium Glycinate", "magnesium aids vitamin D metabolism and activation")],
    "Magnesium Glycinate": [("Vitamin D3 + K2", "magnesium aids vitamin D metabolism and activation")],
    "Collagen Peptides": [("Vitamin C", "essential cofactor for collagen synthesis")],
    "CoQ10": [("Omega-3 (EPA/DHA)", "complementary cardiovascular support")],
    "Omega-3 (EPA/DHA)": [
        ("CoQ10", "complementary cardiovascular support"),
        ("Creatine Monohydrate", "combined recovery and anti-inflammatory support"),
    ],
    "NAC": [("Vitamin C", "supports glutathione production")],
    "Creatine Monohydrate": [("Omega-3 (EPA/DHA)", "combined recovery and anti-inflammatory support")],
}

# (supplement, drug_or_class, interaction_type, severity, action, mechanism)
# major / contraindicated rows remove the supplement; minor / moderate rows keep it with a warning
DRUG_INTERACTIONS: List[Tuple[str, str, str, str, str, str]] = [
    ("Omega-3 (EPA/DHA)", "warfarin", "pharmacodynamic", "major", "monitor",
     "high-dose fish oil adds to warfarin's anticoagulant effect and raises bleeding risk"),
    ("Omega-3 (EPA/DHA)", "blood_thinner", "pharmacodynamic", "major", "monitor",
     "omega-3s have a mild antiplatelet effect that stacks with blood thinners"),
    ("Omega-3 (EPA/DHA)", "ssri", "pharmacodynamic", "minor", "monitor",
     "both can slightly reduce platelet aggregation"),
    ("Vitamin D3 + K2", "warfarin", "pharmacodynamic", "contraindicated", "other",
     "vitamin K directly counteracts warfarin"),
    ("Iron", "levothyroxine", "pharmacokinetic", "major", "separate_timing",
     "iron binds levothyroxine in the gut and blocks its absorption"),
    ("Iron", "acid_reducer", "pharmacokinetic", "minor", "other",
     "lower stomach acid reduces how much iron you absorb"),
    ("Zinc", "levothyroxine", "pharmacokinetic", "moderate", "separate_timing",
     "zinc can reduce levothyroxine absorption when taken together"),
    ("Magnesium Glycinate", "levothyroxine", "pharmacokinetic", "moderate", "separate_timing",
     "magnesium can reduce levothyroxine absorption when taken together"),
    ("Magnesium Glycinate", "blood_pressure", "additive", "minor", "monitor",
     "magnesium has a mild blood-pressure-lowering effect"),
    ("CoQ10", "blood_pressure", "additive", "moderate", "monitor",
     "CoQ10 can modestly lower blood pressure"),
    ("CoQ10", "statin", "nutrient_depletion", "minor", "other",
     "statins lower the body's own CoQ10 production, which supplementation can replenish"),
    ("CoQ10", "warfarin", "pharmacodynamic", "moderate", "monitor",
     "CoQ10 is structurally similar to vitamin K and may reduce warfarin's effect"),
    ("Vitamin C", "immunosuppressant", "pharmacodynamic", "minor", "monitor",
     "high-dose antioxidants may blunt some immunosuppressant effects"),
    ("NAC", "immunosuppressant", "pharmacodynamic", "moderate", "monitor",
     "NAC modulates immune signaling"),
    ("NAC", "nitroglycerin", "pharmacodynamic", "major", "other",
     "NAC can enhance nitroglycerin's effects and cause severe low blood pressure"),
    ("Berberine", "metformin", "additive", "moderate", "adjust_dose",
     "both lower blood sugar, so the combined effect can be stronger than expected"),
    ("Berberine", "diabetes", "additive", "moderate", "monitor",
     "berberine lowers blood glucose on top of diabetes medication"),
    ("Ashwagandha KSM-66", "levothyroxine", "pharmacodynamic", "moderate", "monitor",
     "ashwagandha may raise thyroid hormone levels"),
    ("Ashwagandha KSM-66", "sedative", "additive", "moderate", "monitor",
     "ashwagandha can add to the drowsiness caused by sedatives"),
    ("Ashwagandha KSM-66", "immunosuppressant", "pharmacodynamic", "major", "other",
     "ashwagandha stimulates immune activity and can work against immunosuppressants"),
    ("Melatonin", "sedative", "additive", "moderate", "monitor",
     "melatonin can deepen the sedation from sleep medications"),
    ("Rhodiola Rosea", "ssri", "pharmacodynamic", "moderate", "monitor",
     "rhodiola has mild serotonergic activity"),
    ("L-Theanine", "blood_pressure", "additive", "minor", "monitor",
     "L-theanine may slightly lower blood pressure"),
    ("Lion's Mane", "blood_thinner", "pharmacodynamic", "moderate", "monitor",
     "lion's mane may slow blood clotting"),
    ("Lion's Mane", "diabetes", "additive", "minor", "monitor",
     "lion's mane may lower blood sugar"),
]

# (supplement, condition, severity, rationale)
CONTRAINDICATIONS: List[Tuple[str, str, str, str]] = [
    ("Iron", "hemochromatosis", "relative",
     "iron overload disorders make additional iron unsafe without lab monitoring"),
    ("Ashwagandha KSM-66", "thyroid_condition", "relative",
     "ashwagandha can shift thyroid hormone levels"),
    ("Ashwagandha KSM-66", "pregnancy", "relative",
     "traditional use as an abortifacient; safety in pregnancy is not established"),
    ("Berberine", "pregnancy", "relative",
     "berberine crosses the placenta and may harm the newborn"),
]

# keyword (substring of the user's allergy text) → excluded supplements
ALLERGY_EXCLUSIONS: Dict[str, List[str]] = {
    "fish": ["Omega-3 (EPA/DHA)"],
    "shellfish": ["Omega-3 (EPA/DHA)"],
    "seafood": ["Omega-3 (EPA/DHA)"],
    "bovine": ["Collagen Peptides"],
    "beef": ["Collagen Peptides"],
    "mushroom": ["Lion's Mane"],
    "cherry": ["Tart Cherry Extract"],
}

PREGNANCY_EXCLUSIONS: List[str] = ["Ashwagandha KSM-66", "Berberine"]

# diet → supplements added after selection, exempt from the size bound and category cap
DIET_ADDITIONS: Dict[str, List[str]] = {
    "vegan": ["Vitamin B Complex", "Vitamin D3 + K2"],
    "vegetarian": ["Vitamin B Complex", "Vitamin D3 + K2"],
}

DIET_ADDITION_REASONS: Dict[str, str] = {
    "Vitamin B Complex": "B12 is found almost exclusively in animal foods",
    "Vitamin D3 + K2": "few plant foods provide meaningful vitamin D",
}

# Opening clause for why-included text: "<name> <phrase>."
WHY_PHRASES: Dict[str, str] = {
    "Magnesium Glycinate": "calms the nervous system and relaxes muscles",
    "Vitamin D3 + K2": "supports immune function, energy and healthy calcium use",
    "Omega-3 (EPA/DHA)": "feeds brain and heart cells the fatty acids they run on",
    "Ashwagandha KSM-66": "helps lower cortisol and blunt the stress response",
    "L-Theanine": "promotes calm focus without drowsiness",
    "Vitamin B Complex": "powers the metabolic pathways that turn food into energy",
    "Probiotics": "replenishes beneficial gut bacteria",
    "Zinc": "supports immune defenses and tissue repair",
    "Vitamin C": "protects cells from oxidative stress and drives collagen production",
    "CoQ10": "fuels energy production inside your mitochondria",
    "Creatine Monohydrate": "restores the quick energy muscles and brain cells use under load",
    "Collagen Peptides": "supplies the building blocks for skin, hair and nails",
    "Lion's Mane": "stimulates nerve growth factor for sharper thinking",
    "Rhodiola Rosea": "helps your body resist physical and mental fatigue",
    "Melatonin": "signals your body that it is time to sleep",
    "Biotin": "supports keratin production for stronger hair and nails",
    "Iron": "carries oxygen to your muscles and brain",
    "NAC": "boosts glutathione, your body's master antioxidant",
    "Berberine": "supports healthy blood sugar and a balanced gut",
    "Tart Cherry Extract": "provides natural melatonin and anti-inflammatory anthocyanins",
}

# Medication list from onboarding, with the interaction keys each one carries
# (name, category, generic/brand alias, interaction keys)
MEDICATIONS: List[Tuple[str, str, str, List[str]]] = [
    # Cardiovascular
    ("Lisinopril", "Cardiovascular", None, ["blood_pressure"]),
    ("Amlodipine", "Cardiovascular", None, ["blood_pressure"]),
    ("Losartan", "Cardiovascular", None, ["blood_pressure"]),
    ("Metoprolol", "Cardiovascular", None, ["blood_pressure"]),
    ("Atenolol", "Cardiovascular", None, ["blood_pressure"]),
    ("Hydrochlorothiazide", "Cardiovascular", None, ["blood_pressure"]),
    ("Furosemide", "Cardiovascular", None, ["blood_pressure"]),
    ("Valsartan", "Cardiovascular", None, ["blood_pressure"]),
    ("Diltiazem", "Cardiovascular", None, ["blood_pressure"]),
    ("Carvedilol", "Cardiovascular", None, ["blood_pressure"]),
    ("Nitroglycerin", "Cardiovascular", None, ["nitroglycerin", "blood_pressure"]),
    ("Warfarin", "Cardiovascular", "Coumadin", ["warfarin", "blood_thinner"]),
    ("Eliquis", "Cardiovascular", "Apixaban", ["blood_thinner"]),
    ("Xarelto", "Cardiovascular", "Rivaroxaban", ["blood_thinner"]),
    ("Clopidogrel", "Cardiovascular", "Plavix", ["blood_thinner"]),
    ("Atorvastatin", "Cardiovascular", "Lipitor", ["statin"]),
    ("Rosuvastatin", "Cardiovascular", "Crestor", ["statin"]),
    ("Simvastatin", "Cardiovascular", "Zocor", ["statin"]),
    ("Pravastatin", "Cardiovascular", None, ["statin"]),
    # Diabetes
    ("Metformin", "Diabetes", None, ["metformin", "diabetes"]),
    ("Glipizide", "Diabetes", None, ["diabetes"]),
    ("Glyburide", "Diabetes", None, ["diabetes"]),
    ("Jardiance", "Diabetes", "Empagliflozin", ["diabetes"]),
    ("Farxiga", "Diabetes", "Dapagliflozin", ["diabetes"]),
    ("Ozempic", "Diabetes", "Semaglutide", ["diabetes"]),
    ("Trulicity", "Diabetes", "Dulaglutide", ["diabetes"]),
    ("Mounjaro", "Diabetes", "Tirzepatide", ["diabetes"]),
    ("Januvia", "Diabetes", "Sitagliptin", ["diabetes"]),
    ("Insulin", "Diabetes", None, ["diabetes"]),
    ("Pioglitazone", "Diabetes", None, ["diabetes"]),
    # Mental Health
    ("Sertraline", "Mental Health", "Zoloft", ["ssri"]),
    ("Escitalopram", "Mental Health", "Lexapro", ["ssri"]),
    ("Fluoxetine", "Mental Health", "Prozac", ["ssri"]),
    ("Citalopram", "Mental Health", "Celexa", ["ssri"]),
    ("Paroxetine", "Mental Health", "Paxil", ["ssri"]),
    ("Venlafaxine", "Mental Health", "Effexor", ["ssri"]),
    ("Duloxetine", "Mental Health", "Cymbalta", ["ssri"]),
    ("Bupropion", "Mental Health", "Wellbutrin", []),
    ("Trazodone", "Mental Health", None, ["sedative"]),
    ("Buspirone", "Mental Health", None, []),
    ("Alprazolam", "Mental Health", "Xanax", ["sedative"]),
    ("Lorazepam", "Mental Health", "Ativan", ["sedative"]),
    ("Clonazepam", "Mental Health", "Klonopin", ["sedative"]),
    ("Aripiprazole", "Mental Health", "Abilify", []),
    ("Quetiapine", "Mental Health", "Seroquel", ["sedative"]),
    ("Lamotrigine", "Mental Health", "Lamictal", []),
    ("Lithium", "Mental Health", None, []),
    # Pain & Inflammation
    ("Ibuprofen", "Pain & Inflammation", "Advil", []),
    ("Naproxen", "Pain & Inflammation", "Aleve", []),
    ("Acetaminophen", "Pain & Inflammation", "Tylenol", []),
    ("Aspirin", "Pain & Inflammation", None, ["blood_thinner"]),
    ("Meloxicam", "Pain & Inflammation", "Mobic", []),
    ("Celecoxib", "Pain & Inflammation", "Celebrex", []),
    ("Gabapentin", "Pain & Inflammation", "Neurontin", ["sedative"]),
    ("Pregabalin", "Pain & Inflammation", "Lyrica", ["sedative"]),
    ("Tramadol", "Pain & Inflammation", None, []),
    ("Cyclobenzaprine", "Pain & Inflammation", "Flexeril", ["sedative"]),
    ("Prednisone", "Pain & Inflammation", None, ["immunosuppressant"]),
    ("Methylprednisolone", "Pain & Inflammation", None, ["immunosuppressant"]),
    # Thyroid
    ("Levothyroxine", "Thyroid", "Synthroid", ["levothyroxine"]),
    ("Liothyronine", "Thyroid", "Cytomel", ["levothyroxine"]),
    ("Armour Thyroid", "Thyroid", None, ["levothyroxine"]),
    ("Methimazole", "Thyroid", "Tapazole", []),
    # Respiratory
    ("Albuterol", "Respiratory", "ProAir", []),
    ("Fluticasone", "Respiratory", "Flonase", []),
    ("Montelukast", "Respiratory", "Singulair", []),
    ("Cetirizine", "Respiratory", "Zyrtec", []),
    ("Loratadine", "Respiratory", "Claritin", []),
    ("Fexofenadine", "Respiratory", "Allegra", []),
    ("Tiotropium", "Respiratory", "Spiriva", []),
    ("Budesonide", "Respiratory", "Pulmicort", []),
    # GI
    ("Omeprazole", "GI", "Prilosec", ["acid_reducer"]),
    ("Pantoprazole", "GI", "Protonix", ["acid_reducer"]),
    ("Esomeprazole", "GI", "Nexium", ["acid_reducer"]),
    ("Famotidine", "GI", "Pepcid", ["acid_reducer"]),
    ("Ranitidine", "GI", "Zantac", ["acid_reducer"]),
    ("Ondansetron", "GI", "Zofran", []),
    ("Dicyclomine", "GI", "Bentyl", []),
    ("Sucralfate", "GI", "Carafate", []),
    ("Mesalamine", "GI", "Lialda", []),
    # Hormones
    ("Estradiol", "Hormones", None, []),
    ("Progesterone", "Hormones", "Prometrium", []),
    ("Testosterone", "Hormones", None, []),
    ("Medroxyprogesterone", "Hormones", "Provera", []),
    ("Oral Contraceptive", "Hormones", None, []),
    ("Finasteride", "Hormones", "Propecia", []),
    ("Tamoxifen", "Hormones", None, []),
    ("Spironolactone", "Hormones", None, ["blood_pressure"]),
    # Neurological & Sleep
    ("Sumatriptan", "Neurological & Sleep", "Imitrex", []),
    ("Topiramate", "Neurological & Sleep", "Topamax", []),
    ("Amitriptyline", "Neurological & Sleep", None, ["sedative"]),
    ("Zolpidem", "Neurological & Sleep", "Ambien", ["sedative"]),
    ("Eszopiclone", "Neurological & Sleep", "Lunesta", ["sedative"]),
    ("Hydroxyzine", "Neurological & Sleep", None, ["sedative"]),
    ("Modafinil", "Neurological & Sleep", "Provigil", []),
    ("Adderall", "Neurological & Sleep", "Amphetamine", []),
    ("Methylphenidate", "Neurological & Sleep", "Ritalin", []),
    ("Levetiracetam", "Neurological & Sleep", "Keppra", []),
    ("Donepezil", "Neurological & Sleep", "Aricept", []),
]

CATEGORY_LABELS: Dict[str, str] = {
    "mineral": "Minerals",
    "vitamin": "Vitamins",
    "fatty_acid": "Fatty Acids",
    "adaptogen": "Adaptogens",
    "amino_acid": "Amino Acids",
    "probiotic": "Probiotics",
    "coenzyme": "Coenzymes",
    "protein": "Proteins",
    "mushroom": "Mushrooms",
    "hormone": "Hormones",
    "plant_extract": "Plant Extracts",
    "fruit_extract": "Fruit Extracts",
}
