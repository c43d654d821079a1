"""Default configuration constants for the Trainee Distribution Planner."""

# Default intake (total trainees to distribute)
DEFAULT_TOTAL_TRAINEES = 120
MAX_TOTAL_TRAINEES = 10_000

# Instructor count bounds for a single specialization (sidebar slider)
MIN_INSTRUCTORS = 1
MAX_INSTRUCTORS = 100
NEW_SPECIALIZATION_INSTRUCTORS = 10

# Department shown in the header
DEPARTMENT_NAME = "Mechanical Technology Department"

# Chart palette, cycled per specialization
CATEGORY_COLORS = ["#2563eb", "#10b981", "#f59e0b", "#ef4444", "#8b5cf6", "#ec4899"]
TRAINEE_BAR_COLOR = "#2563eb"
INSTRUCTOR_BAR_COLOR = "#cbd5e1"

# Average-ratio gauge: ratio * scale, capped at 100
RATIO_GAUGE_SCALE = 4

# Advisory service defaults (overridable from the environment)
DEFAULT_ADVISORY_MODEL = "gemini-2.5-flash-lite"
DEFAULT_ADVISORY_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_ADVISORY_TIMEOUT = 30.0
ADVISORY_TEMPERATURE = 0.4

# Fallback advisory content
FALLBACK_NOT_CONFIGURED_SUMMARY = (
    "The advisory service API key is not available. "
    "Please check the environment configuration."
)
FALLBACK_NOT_CONFIGURED_RECOMMENDATIONS = [
    "Set GEMINI_API_KEY to enable the smart analysis feature.",
]
FALLBACK_ERROR_SUMMARY = (
    "Sorry, the smart analysis could not be completed. "
    "Please review the distribution manually against the department's standards."
)
FALLBACK_ERROR_RECOMMENDATIONS = [
    "Make sure instructor teaching loads are balanced according to regulations.",
    "Review the seating capacity of classrooms and workshops.",
]

# Results table columns
RESULT_COLUMNS = ["Specialization", "Instructors", "Trainees", "Percentage", "Trainees / Instructor"]

# Upload template columns
CATEGORY_ID_COLUMN = "ID"
CATEGORY_LABEL_COLUMN = "Specialization"
CATEGORY_WEIGHT_COLUMN = "Instructors"

# Logging
DEFAULT_LOG_LEVEL = "INFO"
