"""
config.py - Configuration for the pivot grid layout model
"""
import logging
import os
from typing import Optional
from dataclasses import dataclass

_DATA_HEADERS_LOCATIONS = ("rows", "columns")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class PivotGridSettings:
    """Settings shared by every header tree built in this process"""

    # Labels of synthetic total headers
    grand_total_label: str = "Grand Total"
    subtotal_label_prefix: str = "Total "

    # Layout
    default_data_headers_location: str = "columns"  # rows or columns

    # Logging
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> 'PivotGridSettings':
        """Load configuration from environment variables"""
        config = cls()

        config.grand_total_label = os.getenv('PIVOT_GRID_GRAND_TOTAL_LABEL', config.grand_total_label)
        config.subtotal_label_prefix = os.getenv('PIVOT_GRID_SUBTOTAL_PREFIX', config.subtotal_label_prefix)
        config.default_data_headers_location = os.getenv(
            'PIVOT_GRID_DATA_HEADERS_LOCATION', config.default_data_headers_location
        )
        config.log_level = os.getenv('PIVOT_GRID_LOG_LEVEL', config.log_level).upper()

        return config

    def validate(self) -> None:
        """Validate configuration settings"""
        errors = []

        if self.default_data_headers_location not in _DATA_HEADERS_LOCATIONS:
            errors.append("default_data_headers_location must be 'rows' or 'columns'")

        if self.log_level not in _LOG_LEVELS:
            errors.append(f"log_level must be one of {', '.join(_LOG_LEVELS)}")

        if errors:
            raise ValueError(f"Configuration validation errors: {'; '.join(errors)}")


class ConfigManager:
    """Manager for configuration loading and validation"""

    def __init__(self):
        self.config: Optional[PivotGridSettings] = None

    def load_config(self, config_source: Optional[str] = None) -> PivotGridSettings:
        """Load configuration from various sources"""
        if config_source == 'env':
            self.config = PivotGridSettings.from_env()
        else:
            self.config = PivotGridSettings()

        self.config.validate()
        return self.config

    def get_config(self) -> PivotGridSettings:
        """Get the loaded configuration"""
        if self.config is None:
            self.config = self.load_config()
        return self.config


# Global configuration manager
config_manager = ConfigManager()


def get_config() -> PivotGridSettings:
    """Get the global configuration"""
    return config_manager.get_config()


def configure_logging(settings: Optional[PivotGridSettings] = None) -> None:
    """Setup logging for the pivot grid package"""
    settings = settings or get_config()
    settings.validate()
    logging.basicConfig(level=getattr(logging, settings.log_level))
    logging.getLogger("pivot_grid").setLevel(settings.log_level)
