import argparse
import sys
import os
from dataclasses import asdict
from typing import Optional
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
from moodmuse.config.settings import ConfigManager, AppConfig
from moodmuse.utils.logging import StructuredLogger
from moodmuse.data.catalog import Catalog
from moodmuse.data.loader import DatasetLoader
from moodmuse.errors import DatasetUnavailableError, EmptyQueryError
from moodmuse.models.mood_classifier import MoodClassifier
from moodmuse.models.row_classifier import RowClassifier
from moodmuse.recommendation.composer import ResponseComposer, ComposedRecommendation
from moodmuse.recommendation.engine import RecommendationEngine
from moodmuse.recommendation.schemas import RecommendationRequest
from moodmuse.recommendation.selector import RandomSelector


class MoodMuseApp:
    def __init__(self, config_path: Optional[str] = None):
        self.config_manager = ConfigManager()
        self.config: Optional[AppConfig] = None
        self.logger: Optional[StructuredLogger] = None
        self.config_path = config_path
        self.catalog: Optional[Catalog] = None

    def initialize(self) -> None:
        try:
            self.config = self.config_manager.load(self.config_path)
            self.logger = StructuredLogger(
                "moodmuse.main",
                level=self.config.logging.level,
                fmt=self.config.logging.format
            )
            self.logger.log_config(asdict(self.config))
            self.logger.info("MoodMuse initialized successfully")
        except Exception as e:
            print(f"Failed to initialize MoodMuse: {e}")
            sys.exit(1)

    def load_catalog(self, dataset_path: Optional[str] = None) -> Catalog:
        with self.logger.operation_context("MoodMuseApp", "load_catalog") as log:
            classification = self.config.classification
            classifier = RowClassifier(MoodClassifier({
                'mood_thresholds': classification.mood_thresholds,
                'max_tags': classification.max_tags
            }))
            loader = DatasetLoader(self.config.data.__dict__, classifier=classifier, logger=log)
            self.catalog = loader.build_catalog(dataset_path)
        return self.catalog

    def recommend(self, mood: str, language: Optional[str] = None,
                  count: Optional[int] = None, seed: Optional[int] = None) -> None:
        catalog = self.catalog or self.load_catalog()
        with self.logger.operation_context("MoodMuseApp", "recommend") as log:
            if seed is None:
                seed = self.config.recommendation.random_seed
            selector = RandomSelector(seed)
            engine = RecommendationEngine(
                catalog,
                selector,
                expansion_factor=self.config.recommendation.expansion_factor
            )
            composer = ResponseComposer(selector, self.config.data.search_url_template)
            request = RecommendationRequest(
                mood=mood,
                language=language,
                count=count or self.config.recommendation.default_count
            )
            response = engine.respond(request)
            log.info("Recommendations generated",
                     num_recommendations=len(response.songs),
                     tier=response.tier.value,
                     total_candidates=response.total_candidates,
                     processing_time_ms=response.processing_time_ms)
            self._display_recommendations(composer.compose(response, len(catalog), mood, language))

    def show_stats(self) -> None:
        catalog = self.catalog or self.load_catalog()
        print(f"\nTotal songs: {len(catalog)}")
        print("\nMoods:")
        for mood, count in sorted(catalog.mood_counts().items(), key=lambda item: item[1], reverse=True):
            print(f"  {mood:<12} {count}")
        print("\nLanguages:")
        for language, count in sorted(catalog.language_counts().items(), key=lambda item: item[1], reverse=True):
            print(f"  {language:<12} {count} ({count / len(catalog) * 100:.1f}%)")

    def search(self, query: str, limit: int = 20) -> None:
        catalog = self.catalog or self.load_catalog()
        results = catalog.search(query, limit)
        if not results:
            print(f"No songs match {query!r}.")
            return
        for i, song in enumerate(results, 1):
            print(f"{i:2d}. {song.title} - {song.artist} [{song.language}, {song.mood}]")

    def _display_recommendations(self, composed: ComposedRecommendation) -> None:
        print("\n" + "=" * 60)
        print("MOODMUSE RECOMMENDATIONS")
        print("=" * 60)
        print(f"Mood: {composed.mood} | Language: {composed.language}")
        if composed.no_match:
            print(f"\nNo songs found for this mood in {composed.language}.")
            return
        print(f"\n{composed.ai_text}")
        print(f"Showing {composed.total_found} of {composed.total_in_database} songs in the catalog\n")
        for i, song in enumerate(composed.songs, 1):
            print(f"{i:2d}. {song['title']} - {song['artist']}")
            print(f"     Mood: {song['mood']} | Language: {song['language']} | Genre: {song['genre']}")
            if song['tags']:
                print(f"     Tags: {', '.join(song['tags'])}")
            print(f"     YouTube: {song['youtube_url']}")
            print()


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="MoodMuse - mood and language based song recommendations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to configuration file (packaged defaults if omitted)"
    )
    parser.add_argument(
        "--dataset",
        help="Path to the song dataset CSV (overrides the config)"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    recommend_parser = subparsers.add_parser("recommend", help="Recommend songs for a mood")
    recommend_parser.add_argument(
        "--mood",
        required=True,
        help="Mood, e.g. happy, sad, energetic, relaxed, romantic, angry"
    )
    recommend_parser.add_argument(
        "--language",
        default=None,
        help="Language, e.g. English, Hindi, Korean (default: any language)"
    )
    recommend_parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="Number of songs to return"
    )
    recommend_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible picks"
    )
    subparsers.add_parser("stats", help="Show mood and language counts")
    search_parser = subparsers.add_parser("search", help="Search songs by title, artist, language or mood")
    search_parser.add_argument("query", help="Search text")
    search_parser.add_argument(
        "--limit",
        type=int,
        default=20,
        help="Maximum number of results"
    )
    subparsers.add_parser("serve", help="Run the REST API")
    return parser


def main():
    parser = create_parser()
    args = parser.parse_args()
    if not args.command:
        parser.print_help()
        sys.exit(1)
    app = MoodMuseApp(args.config)
    app.initialize()
    try:
        if args.command == "serve":
            import uvicorn
            from moodmuse.api.app import create_app
            if args.config:
                os.environ["MOODMUSE_CONFIG"] = args.config
            if args.dataset:
                os.environ["MOODMUSE_DATASET_PATH"] = args.dataset
            uvicorn.run(create_app(app.config), host=app.config.server.host, port=app.config.server.port)
            return
        app.load_catalog(args.dataset)
        if args.command == "recommend":
            app.recommend(args.mood, args.language, args.count, args.seed)
        elif args.command == "stats":
            app.show_stats()
        elif args.command == "search":
            app.search(args.query, args.limit)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(1)
    except (DatasetUnavailableError, EmptyQueryError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
