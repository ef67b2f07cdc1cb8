import logging
from typing import Any

from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from dermarec.config import get_settings
from dermarec.errors import ProfileValidationError
from dermarec.schemas import IngredientListRequest
from dermarec.services.conflicts import analyze_ingredient_list
from dermarec.services.recommendation import RecommendationEngine

settings = get_settings()

# Set up logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="dermarec", version=settings.algorithm_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

engine = RecommendationEngine(settings)


@app.get("/")
async def health_check():
    return {
        "status": "healthy",
        "service": settings.service_name,
        "algorithm_version": settings.algorithm_version,
    }


@app.post("/recommendations")
def create_recommendations(profile: Any = Body(default=None)):
    try:
        result = engine.generate_recommendations(profile)
    except ProfileValidationError as e:
        logger.warning(f"Rejected profile: {e.message}")
        raise HTTPException(status_code=422, detail=e.message)
    except Exception as e:
        logger.error(f"Error generating recommendations: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))
    return result.model_dump(mode="json", by_alias=True)


@app.post("/ingredients/analyze")
def analyze_ingredients(request: IngredientListRequest):
    analysis = analyze_ingredient_list(request.ingredients)
    return {**analysis.model_dump(mode="json"), "has_conflicts": analysis.has_conflicts}
