"""
Dataset loading for the MoodMuse system.
"""
import os
from typing import Any, Dict, Iterator, Optional

import pandas as pd

from .catalog import Catalog
from .validator import DataValidator
from ..errors import DatasetUnavailableError
from ..models.row_classifier import RowClassifier
from ..utils.logging import StructuredLogger, get_logger


class DatasetLoader:
    """Loads the song CSV, validates it and builds the Catalog."""

    def __init__(self,
                 config: Dict[str, Any],
                 validator: Optional[DataValidator] = None,
                 classifier: Optional[RowClassifier] = None,
                 logger: Optional[StructuredLogger] = None):
        """Initialize the dataset loader with configuration.

        Args:
            config: Data configuration dictionary (needs 'dataset_path')
            validator: Data validator instance (optional)
            classifier: Row classifier instance (optional)
            logger: Structured logger (optional)
        """
        self.config = config
        self.validator = validator or DataValidator()
        self.classifier = classifier or RowClassifier()
        self.logger = logger or get_logger(__name__)

    def load_dataset(self, path: Optional[str] = None) -> pd.DataFrame:
        """Load dataset from CSV file.

        Every column is read as text so that classification sees the raw
        values; blank cells stay empty strings.

        Args:
            path: Path to CSV file (uses config path if None)

        Returns:
            Loaded DataFrame

        Raises:
            DatasetUnavailableError: If the file is missing, unreadable or invalid
        """
        dataset_path = path or self.config.get('dataset_path')
        if not dataset_path:
            raise DatasetUnavailableError("No dataset path provided in config or parameter")
        if not os.path.exists(dataset_path):
            raise DatasetUnavailableError(f"Dataset file not found: {dataset_path}")
        try:
            df = pd.read_csv(dataset_path, dtype=str, keep_default_na=False)
        except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise DatasetUnavailableError(f"Failed to read CSV file {dataset_path}: {e}") from e

        validation_result = self.validator.validate_all(df)
        if validation_result.has_errors():
            raise DatasetUnavailableError(
                "Dataset validation failed: " + "; ".join(validation_result.errors)
            )
        for warning in validation_result.warnings:
            self.logger.warning("Dataset validation warning", detail=warning)
        return df

    @staticmethod
    def iter_records(df: pd.DataFrame) -> Iterator[Dict[str, Any]]:
        """Yield each row as a plain dict keyed by column name."""
        columns = list(df.columns)
        for values in df.itertuples(index=False, name=None):
            yield dict(zip(columns, values))

    def build_catalog(self, path: Optional[str] = None) -> Catalog:
        """Execute the complete load pipeline.

        Args:
            path: Path to dataset (uses config if None)

        Returns:
            Catalog of classified songs

        Raises:
            DatasetUnavailableError: If loading fails or no usable songs remain
        """
        df = self.load_dataset(path)
        catalog = Catalog.build(self.iter_records(df), self.classifier, self.logger)
        if not catalog:
            raise DatasetUnavailableError(
                f"Dataset contains no usable songs ({catalog.skipped_rows} rows skipped)"
            )
        self.logger.info(
            "Catalog built",
            total_songs=len(catalog),
            skipped_rows=catalog.skipped_rows
        )
        self.log_language_distribution(catalog)
        return catalog

    def log_language_distribution(self, catalog: Catalog) -> None:
        total = len(catalog)
        distribution = {
            language: {
                'songs': count,
                'percent': round(count / total * 100, 1)
            }
            for language, count in sorted(
                catalog.language_counts().items(), key=lambda item: item[1], reverse=True
            )
        }
        samples = {
            language: [f"{song.title} - {song.artist} [{song.genre}] ({song.mood})" for song in songs]
            for language, songs in catalog.language_samples().items()
        }
        self.logger.info("Language distribution", distribution=distribution, samples=samples)
