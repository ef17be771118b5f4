"""
Test suite for settings and grid configuration
"""
import logging

import pytest
from pivot_grid.config import (
    ConfigManager,
    PivotGridSettings,
    config_manager,
    configure_logging,
    get_config,
)
from pivot_grid.types.dimension import DataField, Dimension, Field
from pivot_grid.types.grid_config import GridConfig


def test_settings_creation():
    """Test creation of PivotGridSettings"""
    config = PivotGridSettings()

    assert config.grand_total_label == "Grand Total"
    assert config.subtotal_label_prefix == "Total "
    assert config.default_data_headers_location == "columns"
    assert config.log_level == "WARNING"


def test_settings_validation():
    """Test configuration validation"""
    PivotGridSettings().validate()

    with pytest.raises(ValueError):
        PivotGridSettings(default_data_headers_location="diagonal").validate()

    with pytest.raises(ValueError):
        PivotGridSettings(log_level="LOUD").validate()


def test_config_manager():
    """Test configuration manager functionality"""
    manager = ConfigManager()

    config1 = manager.get_config()
    assert isinstance(config1, PivotGridSettings)

    # Get config again (should return same instance)
    config2 = manager.get_config()
    assert config1 is config2


def test_global_config():
    """Test global configuration access"""
    assert isinstance(get_config(), PivotGridSettings)


def test_config_from_env(monkeypatch):
    """Test loading config from environment variables"""
    monkeypatch.setenv('PIVOT_GRID_GRAND_TOTAL_LABEL', 'Overall')
    monkeypatch.setenv('PIVOT_GRID_SUBTOTAL_PREFIX', 'Sum of ')
    monkeypatch.setenv('PIVOT_GRID_DATA_HEADERS_LOCATION', 'rows')
    monkeypatch.setenv('PIVOT_GRID_LOG_LEVEL', 'debug')

    config = PivotGridSettings.from_env()

    assert config.grand_total_label == 'Overall'
    assert config.subtotal_label_prefix == 'Sum of '
    assert config.default_data_headers_location == 'rows'
    assert config.log_level == 'DEBUG'


def test_load_config_from_env_validates(monkeypatch):
    monkeypatch.setenv('PIVOT_GRID_DATA_HEADERS_LOCATION', 'nowhere')
    with pytest.raises(ValueError):
        ConfigManager().load_config('env')


def test_configure_logging():
    configure_logging(PivotGridSettings(log_level="DEBUG"))
    assert logging.getLogger("pivot_grid").level == logging.DEBUG

    configure_logging(PivotGridSettings())
    assert logging.getLogger("pivot_grid").level == logging.WARNING


def test_configure_logging_rejects_unknown_level():
    """An unknown level is reported as a configuration error"""
    with pytest.raises(ValueError):
        configure_logging(PivotGridSettings(log_level="loud"))


class TestGridConfig:

    def test_data_fields_count(self):
        assert GridConfig().data_fields_count == 1
        assert GridConfig(data_fields=[DataField("a")]).data_fields_count == 1
        assert GridConfig(data_fields=[DataField("a"), DataField("b")]).data_fields_count == 2

    def test_default_location_from_settings(self, monkeypatch):
        monkeypatch.setattr(config_manager, "config", PivotGridSettings(default_data_headers_location="rows"))
        assert GridConfig().data_headers_location == "rows"
        assert GridConfig(data_headers_location="columns").data_headers_location == "columns"

    def test_validate(self):
        GridConfig(data_fields=[DataField("a")], data_headers_location="rows").validate()

        with pytest.raises(ValueError):
            GridConfig(data_headers_location="diagonal").validate()

        with pytest.raises(ValueError):
            GridConfig(data_fields=[DataField("a"), DataField("a")]).validate()

    def test_invalid_config_rejected_on_construction(self):
        """Bad locations and duplicate fields never reach the data cells"""
        with pytest.raises(ValueError):
            GridConfig(data_fields=[DataField("a")], data_headers_location="Rows")

        with pytest.raises(ValueError):
            GridConfig(data_fields=[DataField("a"), DataField("a")], data_headers_location="rows")


class TestDimensionTypes:

    def test_captions_default_to_name(self):
        assert Field("region").caption == "region"
        assert DataField("sales").caption == "sales"
        assert DataField("sales", caption="Sales").caption == "Sales"

    def test_path(self):
        root = Dimension(None, depth=3, is_root=True)
        us = Dimension("US", depth=2, field=Field("region"), parent=root)
        ca = Dimension("CA", depth=1, field=Field("city"), parent=us, is_leaf=True)

        assert root.path() == ()
        assert us.path() == ("US",)
        assert ca.path() == ("US", "CA")

    def test_fieldless_dimension_has_no_sub_total(self):
        root = Dimension(None, depth=2, is_root=True)
        assert root.sub_total.visible is False

    def test_invalid_depth(self):
        with pytest.raises(ValueError):
            Dimension("x", depth=0)


if __name__ == "__main__":
    pytest.main([__file__])
