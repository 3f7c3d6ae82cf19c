"""Basic package tests to verify installation."""


def test_package_imports() -> None:
    """Verify the main package can be imported."""
    import surveyinsights

    assert surveyinsights.__version__


def test_config_module_imports() -> None:
    """Verify config module structure is correct."""
    from surveyinsights.config import (
        ChartDefinition,
        DataSourceConfig,
        PipelineConfig,
        StyleConfig,
        load_config,
    )

    assert ChartDefinition is not None
    assert DataSourceConfig is not None
    assert PipelineConfig is not None
    assert StyleConfig is not None
    assert load_config is not None


def test_aggregation_module_imports() -> None:
    """Verify aggregation module structure is correct."""
    from surveyinsights.aggregation import (
        bin_histogram,
        extract_numeric,
        select_top_n,
        tally_field,
        tally_multi_value,
    )

    assert bin_histogram is not None
    assert extract_numeric is not None
    assert select_top_n is not None
    assert tally_field is not None
    assert tally_multi_value is not None


def test_schemas_module_imports() -> None:
    """Verify schemas module structure is correct."""
    from surveyinsights.schemas import (
        FrequencyTableSchema,
        HistogramBinSchema,
        SurveyResponseSchema,
        build_record_schema,
    )

    assert FrequencyTableSchema is not None
    assert HistogramBinSchema is not None
    assert SurveyResponseSchema is not None
    assert build_record_schema is not None
