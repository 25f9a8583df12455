"""
Data validation module for the MoodMuse system.
"""
from typing import Set
import pandas as pd
from .schemas import ValidationResult


class DataValidator:
    """Validates dataset schema, missing values, and numeric fields."""

    REQUIRED_COLUMNS: Set[str] = {'track', 'artist'}

    OPTIONAL_COLUMNS: Set[str] = {
        'genre', 'seeds', 'valence_tags', 'arousal_tags', 'spotify_id'
    }

    NUMERIC_COLUMNS = ('valence_tags', 'arousal_tags')

    def validate_schema(self, df: pd.DataFrame) -> ValidationResult:
        """Validate that the columns needed for classification are present.

        Args:
            df: DataFrame to validate

        Returns:
            ValidationResult with schema validation results
        """
        result = ValidationResult(is_valid=True, errors=[], warnings=[])
        columns = set(df.columns)
        missing_required = self.REQUIRED_COLUMNS - columns
        for col in sorted(missing_required):
            result.add_error(f"Missing required column: {col}")
        missing_optional = self.OPTIONAL_COLUMNS - columns
        for col in sorted(missing_optional):
            result.add_warning(f"Missing optional column: {col} (defaults will be used)")
        result.metadata = {
            'total_columns': len(df.columns),
            'total_rows': len(df),
            'missing_required_count': len(missing_required),
            'missing_optional_count': len(missing_optional)
        }
        return result

    def check_missing_values(self, df: pd.DataFrame) -> ValidationResult:
        """Count rows that will be skipped for lacking a title or artist.

        Args:
            df: DataFrame to check for missing values

        Returns:
            ValidationResult with missing value analysis
        """
        result = ValidationResult(is_valid=True, errors=[], warnings=[])
        total_rows = len(df)
        blank_counts = {}
        for col in sorted(self.REQUIRED_COLUMNS.intersection(df.columns)):
            blank = df[col].isna() | (df[col].astype(str).str.strip() == "")
            blank_count = int(blank.sum())
            blank_counts[col] = blank_count
            if blank_count > 0:
                percentage = (blank_count / total_rows) * 100
                result.add_warning(
                    f"Column {col} has {blank_count} blank values ({percentage:.1f}%); those rows will be skipped"
                )
        result.metadata = {'blank_counts': blank_counts}
        return result

    def validate_numeric(self, df: pd.DataFrame) -> ValidationResult:
        """Check that valence/arousal columns hold parseable numbers.

        Args:
            df: DataFrame to validate

        Returns:
            ValidationResult with numeric validation results
        """
        result = ValidationResult(is_valid=True, errors=[], warnings=[])
        invalid_counts = {}
        for col in self.NUMERIC_COLUMNS:
            if col not in df.columns:
                continue
            present = df[col][df[col].notna() & (df[col].astype(str).str.strip() != "")]
            parsed = pd.to_numeric(present, errors='coerce')
            invalid = int(parsed.isna().sum())
            invalid_counts[col] = invalid
            if invalid > 0:
                result.add_warning(
                    f"Column {col} has {invalid} non-numeric values; neutral 0.5 will be used"
                )
        result.metadata = {'invalid_numeric_counts': invalid_counts}
        return result

    def validate_all(self, df: pd.DataFrame) -> ValidationResult:
        """Run all validation checks on the dataset.

        Args:
            df: DataFrame to validate

        Returns:
            Combined ValidationResult from all checks
        """
        schema_result = self.validate_schema(df)
        missing_result = self.check_missing_values(df)
        numeric_result = self.validate_numeric(df)
        return ValidationResult(
            is_valid=schema_result.is_valid and missing_result.is_valid and numeric_result.is_valid,
            errors=schema_result.errors + missing_result.errors + numeric_result.errors,
            warnings=schema_result.warnings + missing_result.warnings + numeric_result.warnings,
            metadata={
                'schema_validation': schema_result.metadata,
                'missing_values': missing_result.metadata,
                'numeric_validation': numeric_result.metadata
            }
        )
