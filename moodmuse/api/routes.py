"""
FastAPI routes for the MoodMuse REST API.
"""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from .schemas import (
    MoodRequest,
    RecommendResponse,
    SongResponse,
    MoodsResponse,
    StatsResponse,
    SearchResponse,
    HealthResponse,
    ErrorResponse
)
from .dependencies import get_recommendation_engine, get_catalog, get_composer, get_config
from ..config.settings import AppConfig
from ..data.catalog import Catalog
from ..errors import EmptyQueryError
from ..recommendation.composer import ResponseComposer
from ..recommendation.engine import RecommendationEngine
from ..recommendation.schemas import RecommendationRequest

SEARCH_LIMIT = 20


router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    tags=["System"],
    summary="Health check endpoint"
)
async def health_check(
    catalog: Catalog = Depends(get_catalog),
    config: AppConfig = Depends(get_config)
):
    """
    Check the health status of the API and the size of the loaded catalog.
    """
    return HealthResponse(
        status="ok",
        version=config.versioning.api_version,
        catalog_loaded=catalog is not None,
        total_songs=len(catalog) if catalog is not None else 0
    )


@router.post(
    "/mood",
    response_model=RecommendResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Mood missing"}
    },
    tags=["Recommendations"],
    summary="Recommend songs for a mood and language"
)
async def recommend_for_mood(
    request: MoodRequest,
    engine: RecommendationEngine = Depends(get_recommendation_engine),
    composer: ResponseComposer = Depends(get_composer),
    config: AppConfig = Depends(get_config)
):
    """
    Recommend songs matching a mood, optionally restricted to one language.

    When a specific language is requested and no song in that language fits
    the mood (or a similar mood), the response is empty and `no_match` is
    true. Without a language restriction the API always returns songs.
    """
    count = min(request.count or config.recommendation.default_count,
                config.recommendation.max_count)
    try:
        internal_request = RecommendationRequest(
            mood=request.mood,
            language=request.language,
            count=count
        )
    except EmptyQueryError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    response = engine.respond(internal_request)
    composed = composer.compose(
        response,
        catalog_size=len(engine.catalog),
        mood=request.mood,
        language=request.language
    )
    return RecommendResponse(
        ai_text=composed.ai_text,
        mood=composed.mood,
        language=composed.language,
        total_found=composed.total_found,
        total_in_database=composed.total_in_database,
        no_match=composed.no_match,
        recommendations=[SongResponse(**song) for song in composed.songs]
    )


@router.get(
    "/moods",
    response_model=MoodsResponse,
    tags=["Metadata"],
    summary="List available moods and languages"
)
async def list_moods(catalog: Catalog = Depends(get_catalog)):
    """
    Get the moods and languages present in the catalog.
    """
    return MoodsResponse(
        moods=catalog.moods(),
        languages=catalog.languages(),
        total_songs=len(catalog)
    )


@router.get(
    "/stats",
    response_model=StatsResponse,
    tags=["Metadata"],
    summary="Catalog statistics"
)
async def catalog_stats(catalog: Catalog = Depends(get_catalog)):
    """
    Count songs per mood and per language.
    """
    return StatsResponse(
        total_songs=len(catalog),
        moods=catalog.mood_counts(),
        languages=catalog.language_counts()
    )


@router.get(
    "/search",
    response_model=SearchResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Query missing"}
    },
    tags=["Metadata"],
    summary="Search songs by title, artist, language or mood"
)
async def search_songs(
    q: Optional[str] = Query(default=None, description="Search text"),
    catalog: Catalog = Depends(get_catalog),
    config: AppConfig = Depends(get_config)
):
    """
    Case-insensitive substring search, limited to 20 results.
    """
    if not q or not q.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Query parameter required"
        )
    template = config.data.search_url_template
    return SearchResponse(
        query=q,
        results=[SongResponse(**song.to_dict(template)) for song in catalog.search(q, SEARCH_LIMIT)]
    )
