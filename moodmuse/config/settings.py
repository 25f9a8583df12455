"""
Configuration management for MoodMuse.

Provides centralized configuration loading, validation, and environment variable overrides.
"""

import os
import yaml
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional
from pathlib import Path


DEFAULT_CONFIG_PATH = Path(__file__).parent / "default_config.yaml"

YOUTUBE_SEARCH_TEMPLATE = "https://www.youtube.com/results?search_query={query}"


@dataclass
class DataConfig:
    dataset_path: str = "data/muse_v3.csv"
    search_url_template: str = YOUTUBE_SEARCH_TEMPLATE


@dataclass
class ClassificationConfig:
    """Configuration for row classification."""
    max_tags: int = 5
    mood_thresholds: Dict[str, float] = field(default_factory=lambda: {
        "happy_valence": 0.7,
        "happy_arousal": 0.6,
        "sad_valence": 0.4,
        "sad_arousal": 0.5,
        "energetic_arousal": 0.7,
        "relaxed_arousal": 0.4,
        "romantic_valence_low": 0.5,
        "romantic_valence_high": 0.7
    })


@dataclass
class RecommendationConfig:
    """Configuration for recommendation engine parameters."""
    default_count: int = 6
    max_count: int = 50
    expansion_factor: int = 2
    random_seed: Optional[int] = None


@dataclass
class LoggingConfig:
    """Configuration for logging parameters."""
    level: str = "INFO"
    format: str = "json"


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 3001
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:3000"])


@dataclass
class VersioningConfig:
    api_version: str = "1.0.0"


@dataclass
class AppConfig:
    """Main application configuration containing all sub-configurations."""
    data: DataConfig = field(default_factory=DataConfig)
    classification: ClassificationConfig = field(default_factory=ClassificationConfig)
    recommendation: RecommendationConfig = field(default_factory=RecommendationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    versioning: VersioningConfig = field(default_factory=VersioningConfig)


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


class ConfigManager:
    """Manages application configuration loading, validation, and environment overrides."""

    ENV_MAPPINGS = {
        'MOODMUSE_DATASET_PATH': (['data', 'dataset_path'], str),
        'MOODMUSE_SEARCH_URL_TEMPLATE': (['data', 'search_url_template'], str),
        'MOODMUSE_MAX_TAGS': (['classification', 'max_tags'], int),
        'MOODMUSE_DEFAULT_COUNT': (['recommendation', 'default_count'], int),
        'MOODMUSE_MAX_COUNT': (['recommendation', 'max_count'], int),
        'MOODMUSE_RANDOM_SEED': (['recommendation', 'random_seed'], int),
        'MOODMUSE_LOG_LEVEL': (['logging', 'level'], str),
        'MOODMUSE_LOG_FORMAT': (['logging', 'format'], str),
        'MOODMUSE_HOST': (['server', 'host'], str),
        'MOODMUSE_PORT': (['server', 'port'], int),
    }

    def __init__(self):
        self._config: Optional[AppConfig] = None

    @property
    def config(self) -> Optional[AppConfig]:
        return self._config

    def load(self, config_path: Optional[str] = None) -> AppConfig:
        """
        Load configuration from YAML file with environment variable overrides.

        Args:
            config_path: Path to the YAML configuration file (packaged defaults if None)

        Returns:
            AppConfig: Loaded and validated configuration

        Raises:
            ConfigValidationError: If configuration is invalid
            FileNotFoundError: If config file doesn't exist
        """
        config_file = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_file}")

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        if not isinstance(config_data, dict):
            raise ConfigValidationError(
                f"Configuration root must be a mapping, got {type(config_data).__name__}"
            )

        config_data = self._apply_env_overrides(config_data)
        config = self._create_config_from_dict(config_data)
        self.validate(config)

        self._config = config
        return config

    def _create_config_from_dict(self, config_data: Dict[str, Any]) -> AppConfig:
        """Create AppConfig from dictionary data."""
        data_data = config_data.get('data') or {}
        classification_data = config_data.get('classification') or {}
        recommendation_data = config_data.get('recommendation') or {}
        logging_data = config_data.get('logging') or {}
        server_data = config_data.get('server') or {}
        versioning_data = config_data.get('versioning') or {}

        data_config = DataConfig(
            dataset_path=data_data.get('dataset_path', DataConfig().dataset_path),
            search_url_template=data_data.get('search_url_template', DataConfig().search_url_template)
        )

        # Partial threshold overrides keep the remaining defaults
        thresholds = dict(ClassificationConfig().mood_thresholds)
        thresholds.update(classification_data.get('mood_thresholds') or {})
        classification_config = ClassificationConfig(
            max_tags=classification_data.get('max_tags', ClassificationConfig().max_tags),
            mood_thresholds=thresholds
        )

        recommendation_config = RecommendationConfig(
            default_count=recommendation_data.get('default_count', RecommendationConfig().default_count),
            max_count=recommendation_data.get('max_count', RecommendationConfig().max_count),
            expansion_factor=recommendation_data.get('expansion_factor', RecommendationConfig().expansion_factor),
            random_seed=recommendation_data.get('random_seed', RecommendationConfig().random_seed)
        )

        logging_config = LoggingConfig(
            level=str(logging_data.get('level', LoggingConfig().level)).upper(),
            format=logging_data.get('format', LoggingConfig().format)
        )

        server_config = ServerConfig(
            host=server_data.get('host', ServerConfig().host),
            port=server_data.get('port', ServerConfig().port),
            cors_origins=server_data.get('cors_origins', ServerConfig().cors_origins)
        )

        versioning_config = VersioningConfig(
            api_version=str(versioning_data.get('api_version', VersioningConfig().api_version))
        )

        return AppConfig(
            data=data_config,
            classification=classification_config,
            recommendation=recommendation_config,
            logging=logging_config,
            server=server_config,
            versioning=versioning_config
        )

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration data."""
        for env_var, (config_path, cast) in self.ENV_MAPPINGS.items():
            env_value = os.getenv(env_var)
            if env_value is None:
                continue

            current = config_data
            for key in config_path[:-1]:
                if not isinstance(current.get(key), dict):
                    current[key] = {}
                current = current[key]

            try:
                current[config_path[-1]] = cast(env_value)
            except ValueError as e:
                raise ConfigValidationError(
                    f"Environment variable {env_var} has invalid value {env_value!r}"
                ) from e

        return config_data

    def validate(self, config: AppConfig) -> bool:
        """
        Validate configuration values.

        Args:
            config: Configuration to validate

        Returns:
            bool: True if valid

        Raises:
            ConfigValidationError: If validation fails
        """
        errors = []

        if not config.data.dataset_path:
            errors.append("Data dataset_path cannot be empty")

        if "{query}" not in (config.data.search_url_template or ""):
            errors.append("Data search_url_template must contain a {query} placeholder")

        if not isinstance(config.classification.max_tags, int) or config.classification.max_tags <= 0:
            errors.append("Classification max_tags must be a positive integer")

        for name, value in config.classification.mood_thresholds.items():
            if not isinstance(value, (int, float)) or not (0.0 <= value <= 1.0):
                errors.append(f"Mood threshold {name} must be between 0.0 and 1.0")

        if config.recommendation.default_count <= 0:
            errors.append("Recommendation default_count must be positive")

        if config.recommendation.max_count < config.recommendation.default_count:
            errors.append("Recommendation max_count must be at least default_count")

        if config.recommendation.expansion_factor <= 0:
            errors.append("Recommendation expansion_factor must be positive")

        if config.recommendation.random_seed is not None and not isinstance(config.recommendation.random_seed, int):
            errors.append("Recommendation random_seed must be an integer or null")

        valid_log_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if config.logging.level not in valid_log_levels:
            errors.append(f"Logging level must be one of: {valid_log_levels}")

        if config.logging.format not in ['json', 'text']:
            errors.append("Logging format must be 'json' or 'text'")

        if not (0 < config.server.port < 65536):
            errors.append("Server port must be between 1 and 65535")

        if not config.versioning.api_version:
            errors.append("API version cannot be empty")

        if errors:
            raise ConfigValidationError(f"Configuration validation failed: {'; '.join(errors)}")

        return True
