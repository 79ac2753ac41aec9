"""Tests for the abstract data source factory."""

import pytest
from structlog.testing import capture_logs

from creational_patterns.creational.abstract_factory import (
    DataSource,
    DataSourceFactory,
    DataSourceType,
    DatabaseDataSource,
    DatabaseFactory,
    NetworkDataSource,
    NetworkFactory,
)
from creational_patterns.domain.core.exceptions import (
    DomainException,
    UnrecognizedVariantError,
)


def test_abstract_factory_network():
    # Arrange
    factory = DataSourceFactory.create_factory(NetworkDataSource)

    # Act
    data_source = factory.make_data_source()

    # Assert
    assert isinstance(factory, NetworkFactory)
    assert type(data_source) is NetworkDataSource


def test_abstract_factory_database():
    # Arrange
    factory = DataSourceFactory.create_factory(DatabaseDataSource)

    # Act
    data_source = factory.make_data_source()

    # Assert
    assert isinstance(factory, DatabaseFactory)
    assert type(data_source) is DatabaseDataSource


class TestDataSourceFactorySelection:
    """Test selection of concrete factories."""

    @pytest.mark.parametrize(
        "target, expected",
        [
            (DataSourceType.DATABASE, DatabaseDataSource),
            (DataSourceType.NETWORK, NetworkDataSource),
            ("database", DatabaseDataSource),
            ("network", NetworkDataSource),
        ],
    )
    def test_select_by_tag(self, target, expected):
        """Test that tags select the same variant as the class."""
        data_source = DataSourceFactory.create_factory(target).make_data_source()
        assert type(data_source) is expected

    def test_tag_matches_produced_source(self, data_source_tag):
        """Test that every tag round-trips through its data source."""
        data_source = DataSourceFactory.create_factory(data_source_tag).make_data_source()
        assert data_source.source_type is data_source_tag

    def test_each_call_returns_fresh_factory(self):
        """Test that factories are constructed on demand."""
        first = DataSourceFactory.create_factory(NetworkDataSource)
        second = DataSourceFactory.create_factory(NetworkDataSource)
        assert first is not second

    def test_concrete_factory_declares_variant(self):
        """Test the variant class each factory advertises."""
        assert DatabaseFactory.data_source_type is DatabaseDataSource
        assert NetworkFactory.data_source_type is NetworkDataSource

    def test_concrete_factories_are_usable_directly(self):
        """Test that concrete factories work without the selector."""
        assert type(DatabaseFactory().make_data_source()) is DatabaseDataSource
        assert type(NetworkFactory().make_data_source()) is NetworkDataSource


class TestUnrecognizedVariants:
    """Test rejection of unknown variants."""

    @pytest.mark.parametrize(
        "target",
        [DataSource, str, int, object, "file", "Database", "", None, 42],
    )
    def test_unknown_target_is_rejected(self, target):
        """Test that anything outside the known variants raises."""
        with pytest.raises(UnrecognizedVariantError) as exc_info:
            DataSourceFactory.create_factory(target)

        assert exc_info.value.error_code == "UNRECOGNIZED_VARIANT"
        assert exc_info.value.requested is target
        assert sorted(exc_info.value.known) == ["DatabaseDataSource", "NetworkDataSource"]

    def test_instance_is_rejected(self):
        """Test that a data source instance is not a valid tag."""
        with pytest.raises(UnrecognizedVariantError):
            DataSourceFactory.create_factory(NetworkDataSource())

    def test_subclass_of_known_variant_is_rejected(self):
        """Test that lookup is by exact class."""

        class CachedNetworkDataSource(NetworkDataSource):
            pass

        with pytest.raises(UnrecognizedVariantError):
            DataSourceFactory.create_factory(CachedNetworkDataSource)

    def test_error_is_value_error_and_domain_exception(self):
        """Test that callers can catch the error as an invalid argument."""
        with pytest.raises(ValueError):
            DataSourceFactory.create_factory("file")
        with pytest.raises(DomainException):
            DataSourceFactory.create_factory("file")

    def test_error_details(self):
        """Test the serialised error payload."""
        with pytest.raises(UnrecognizedVariantError) as exc_info:
            DataSourceFactory.create_factory("file")

        error = exc_info.value.to_dict()
        assert error["error_code"] == "UNRECOGNIZED_VARIANT"
        assert error["message"] == "Unrecognized variant requested: 'file'"
        assert error["details"]["requested"] == "'file'"


class TestDataSources:
    """Test data source value semantics."""

    def test_abstract_capability_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            DataSource()

    def test_abstract_factory_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            DataSourceFactory()

    def test_same_variant_instances_are_equal(self):
        assert DatabaseDataSource() == DatabaseDataSource()
        assert hash(NetworkDataSource()) == hash(NetworkDataSource())
        assert DatabaseDataSource() != NetworkDataSource()

    def test_repr(self):
        assert repr(NetworkDataSource()) == "NetworkDataSource()"
        assert repr(DatabaseFactory()) == "DatabaseFactory()"


def test_creation_is_logged():
    with capture_logs() as logs:
        DataSourceFactory.create_factory(NetworkDataSource).make_data_source()

    events = [entry["event"] for entry in logs]
    assert events == ["Created data source factory", "Created datasource"]
    assert logs[0]["factory"] == "NetworkFactory"
    assert logs[1]["data_source"] == "NetworkDataSource()"
