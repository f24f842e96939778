from .status import evaluate_status_checks
from .recommendations import generate_recommendations

__all__ = [
    "evaluate_status_checks",
    "generate_recommendations",
]
