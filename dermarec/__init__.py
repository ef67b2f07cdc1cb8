from dermarec.errors import DermarecError, ProfileValidationError, ReferenceDataError
from dermarec.schemas import RecommendationResult, UserProfile
from dermarec.services.recommendation import RecommendationEngine, generate_recommendations

__all__ = [
    "DermarecError",
    "ProfileValidationError",
    "RecommendationEngine",
    "RecommendationResult",
    "ReferenceDataError",
    "UserProfile",
    "generate_recommendations",
]
