"""
config.py — Centralised configuration & scoring constants
==========================================================
Every tunable constant in the project lives here so that the rest of the
codebase can import from a single source of truth.  The per-biomarker
reference tables are structured data and live in `scoring/ranges.py`.
"""

# ─── Per-biomarker scoring ───────────────────────────────────────────────────
NEUTRAL_SCORE: float = 0.5          # Returned when a range definition is incomplete

# Inside the acceptable band the score blends from ACCEPTABLE_FLOOR (at the
# acceptable edge) up to 1.0 (at the optimal edge).
ACCEPTABLE_FLOOR: float = 0.7
ACCEPTABLE_SPAN: float = 0.3

# Outside the acceptable band: 0.4 minus a relative-distance penalty, floored.
OUT_OF_RANGE_BASE: float = 0.4
OUT_OF_RANGE_MAX_PENALTY: float = 0.6
MIN_BIOMARKER_SCORE: float = 0.1

# ─── Composite score ─────────────────────────────────────────────────────────
COMPLETENESS_BONUS_PER_BIOMARKER: float = 0.5
COMPLETENESS_BONUS_MAX: float = 10.0

CONSISTENCY_MIN_SCORES: int = 3      # Below this, variance is not meaningful
CONSISTENCY_PENALTY_FACTOR: float = 30.0
CONSISTENCY_PENALTY_MAX: float = 15.0

# ─── Confidence ──────────────────────────────────────────────────────────────
# Count contributes up to 90 points, cumulative weight up to 10.
CONFIDENCE_PER_BIOMARKER: float = 0.08
CONFIDENCE_COUNT_MAX: float = 0.9
CONFIDENCE_WEIGHT_FACTOR: float = 0.1
CONFIDENCE_WEIGHT_MAX: float = 0.1

# ─── Health levels (inclusive lower bounds) ──────────────────────────────────
LEVEL_EXCELLENT: float = 85.0
LEVEL_GOOD: float = 70.0
LEVEL_ACCEPTABLE: float = 55.0
LEVEL_FAIR: float = 40.0
# Below LEVEL_FAIR → "Preocupante"

# ─── Recommendations & risk ──────────────────────────────────────────────────
RECOMMENDATION_SCORE_THRESHOLD: float = 0.6   # Individual score below → advice
RISK_FACTOR_SCORE_THRESHOLD: float = 0.4      # Individual score below → risk factor
MAX_RECOMMENDATIONS: int = 5

# Direction cut-offs for biomarkers whose advice depends on high vs low
HEART_RATE_HIGH_BPM: float = 90.0
SYSTOLIC_HIGH_MMHG: float = 140.0

# ─── Voice ───────────────────────────────────────────────────────────────────
# Crude F0 threshold used only to pick the fundamental-frequency sub-range.
# Placeholder heuristic, not a biological claim.
GENDER_F0_THRESHOLD_HZ: float = 200.0

# ─── API ─────────────────────────────────────────────────────────────────────
API_TITLE = "Biomarker Health Score API"
API_VERSION = "0.1.0"
API_HOST = "0.0.0.0"
API_PORT = 8000

# Dashboards allowed to call the API.  "*" suits local demos only.
CORS_ALLOW_ORIGINS: list[str] = ["*"]
