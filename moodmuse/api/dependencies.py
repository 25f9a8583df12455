"""
FastAPI dependency injection for MoodMuse.
"""
import os
from functools import lru_cache
from typing import Optional
import logging

from ..config.settings import ConfigManager, AppConfig
from ..utils.logging import StructuredLogger
from ..data.catalog import Catalog
from ..data.loader import DatasetLoader
from ..models.mood_classifier import MoodClassifier
from ..models.row_classifier import RowClassifier
from ..recommendation.engine import RecommendationEngine
from ..recommendation.composer import ResponseComposer
from ..recommendation.selector import RandomSelector


logger = logging.getLogger(__name__)


class AppState:
    """Singleton state for the MoodMuse application."""

    _instance: Optional["AppState"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self.config_manager = ConfigManager()
        self.config: Optional[AppConfig] = None
        self.logger: Optional[StructuredLogger] = None
        self.catalog: Optional[Catalog] = None
        self.recommendation_engine: Optional[RecommendationEngine] = None
        self.composer: Optional[ResponseComposer] = None
        self._initialized = True

    @property
    def catalog_loaded(self) -> bool:
        return self.catalog is not None

    def initialize(self, config_path: Optional[str] = None) -> None:
        """Load configuration and build the catalog.

        Raises:
            DatasetUnavailableError: If the dataset cannot be loaded; the
                application must not serve queries in that case
        """
        if self.catalog is not None:
            return

        config_path = config_path or os.getenv("MOODMUSE_CONFIG")
        try:
            self.config = self.config_manager.load(config_path)
        except Exception as e:
            logger.error(f"Failed to load MoodMuse configuration: {e}")
            raise

        self.logger = StructuredLogger(
            "moodmuse.api",
            level=self.config.logging.level,
            fmt=self.config.logging.format
        )
        self._load_catalog()
        self.logger.info("MoodMuse API initialized", total_songs=len(self.catalog))

    def _load_catalog(self) -> None:
        classification = self.config.classification
        classifier = RowClassifier(MoodClassifier({
            'mood_thresholds': classification.mood_thresholds,
            'max_tags': classification.max_tags
        }))
        loader = DatasetLoader(self.config.data.__dict__, classifier=classifier, logger=self.logger)

        with self.logger.operation_context("AppState", "load_catalog",
                                           dataset_path=self.config.data.dataset_path):
            catalog = loader.build_catalog()

        recommendation = self.config.recommendation
        selector = RandomSelector(recommendation.random_seed)
        self.recommendation_engine = RecommendationEngine(
            catalog,
            selector,
            expansion_factor=recommendation.expansion_factor
        )
        self.composer = ResponseComposer(selector, self.config.data.search_url_template)
        # Published last so no caller sees a half-built catalog
        self.catalog = catalog


@lru_cache()
def get_app_state() -> AppState:
    """Get or create the application state singleton."""
    state = AppState()
    state.initialize()
    return state


def get_recommendation_engine() -> RecommendationEngine:
    """Dependency for getting the recommendation engine."""
    return get_app_state().recommendation_engine


def get_catalog() -> Catalog:
    return get_app_state().catalog


def get_composer() -> ResponseComposer:
    return get_app_state().composer


def get_config() -> AppConfig:
    """Dependency for getting the app configuration."""
    return get_app_state().config
