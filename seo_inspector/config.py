import os

from dotenv import load_dotenv

load_dotenv()

REQUEST_TIMEOUT = float(os.getenv("SEO_REQUEST_TIMEOUT", "15"))
MAX_REDIRECTS = int(os.getenv("SEO_MAX_REDIRECTS", "10"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

USER_AGENT = (
    "Mozilla/5.0 (compatible; SEOAnalyzerBot/1.0; +http://seotaginspector.com)"
)

# Status checks (good band, inclusive)
STATUS_TITLE_MIN_LENGTH = 30
STATUS_TITLE_MAX_LENGTH = 60
STATUS_DESCRIPTION_MIN_LENGTH = 120
STATUS_DESCRIPTION_MAX_LENGTH = 160

# Scorer bands: outside the outer band costs the major penalty,
# outside the inner band the minor one.
SCORE_TITLE_OUTER = (30, 70)
SCORE_TITLE_INNER = (40, 60)
SCORE_DESCRIPTION_OUTER = (80, 180)
SCORE_DESCRIPTION_INNER = (140, 160)

SCORE_PENALTIES = {
    "title_missing": 20,
    "title_major": 10,
    "title_minor": 5,
    "description_missing": 15,
    "description_major": 10,
    "description_minor": 5,
    "canonical_missing": 10,
    "h1_missing": 10,
    "h1_multiple": 5,
    "og_all_missing": 15,
    "og_per_missing": 5,
    "twitter_missing": 10,
}
SCORE_OG_IMAGE_BONUS = 5

# Recommendations
REC_TITLE_MIN_LENGTH = 30
REC_TITLE_MAX_LENGTH = 60
REC_DESCRIPTION_MIN_LENGTH = 120
REC_DESCRIPTION_MAX_LENGTH = 160

GRADE_THRESHOLDS = [
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
]

STATUS_CHECK_KEYS = ("title", "description", "canonical", "social")
