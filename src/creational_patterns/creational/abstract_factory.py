"""Abstract Factory demonstration.

A ``DataSource`` capability has two variants, each produced by its own
concrete ``DataSourceFactory``. Callers ask the abstract factory for "a
factory for X", where X is either the variant class or a ``DataSourceType``
tag, and never name the concrete factory class themselves:

    >>> factory = DataSourceFactory.create_factory(NetworkDataSource)
    >>> factory.make_data_source()
    NetworkDataSource()

The selection table is fixed: only the two variants below are recognized and
anything else raises ``UnrecognizedVariantError``.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar, Dict, Type, Union

from creational_patterns.domain.core.exceptions import UnrecognizedVariantError
from creational_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class DataSourceType(str, Enum):
    """Tags identifying the known data source variants."""
    DATABASE = "database"
    NETWORK = "network"


class DataSource(ABC):
    """Capability shared by all data source variants.

    Variants carry no state, so two instances of the same variant compare
    equal.
    """

    @property
    @abstractmethod
    def source_type(self) -> DataSourceType:
        """Tag of this variant."""

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DatabaseDataSource(DataSource):
    """Data source backed by a database."""

    @property
    def source_type(self) -> DataSourceType:
        return DataSourceType.DATABASE


class NetworkDataSource(DataSource):
    """Data source backed by a network endpoint."""

    @property
    def source_type(self) -> DataSourceType:
        return DataSourceType.NETWORK


DataSourceTarget = Union[Type[DataSource], DataSourceType, str]


class DataSourceFactory(ABC):
    """Abstract factory for data sources."""

    data_source_type: ClassVar[Type[DataSource]]

    @abstractmethod
    def make_data_source(self) -> DataSource:
        """Build a new data source of this factory's variant."""

    @classmethod
    def create_factory(cls, target: DataSourceTarget) -> "DataSourceFactory":
        """
        Select the concrete factory for a data source variant.

        Args:
            target: The variant class (e.g. ``NetworkDataSource``) or its
                    ``DataSourceType`` tag, by member or by value.

        Returns:
            A new factory whose ``make_data_source()`` builds exactly the
            requested variant.

        Raises:
            UnrecognizedVariantError: If ``target`` names no known variant.
        """
        variant = _resolve_variant(target)
        factory_class = _FACTORIES[variant]
        factory = factory_class()
        logger.debug(
            "Created data source factory",
            requested=repr(target),
            factory=factory_class.__name__,
        )
        return factory

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DatabaseFactory(DataSourceFactory):
    """Factory producing DatabaseDataSource instances."""

    data_source_type = DatabaseDataSource

    def make_data_source(self) -> DataSource:
        data_source = DatabaseDataSource()
        logger.debug("Created datasource", data_source=repr(data_source))
        return data_source


class NetworkFactory(DataSourceFactory):
    """Factory producing NetworkDataSource instances."""

    data_source_type = NetworkDataSource

    def make_data_source(self) -> DataSource:
        data_source = NetworkDataSource()
        logger.debug("Created datasource", data_source=repr(data_source))
        return data_source


# Keyed by exact class: subclasses of a known variant are not recognized.
_FACTORIES: Dict[Type[DataSource], Type[DataSourceFactory]] = {
    factory.data_source_type: factory for factory in (DatabaseFactory, NetworkFactory)
}

_TAGS: Dict[DataSourceType, Type[DataSource]] = {
    DataSourceType.DATABASE: DatabaseDataSource,
    DataSourceType.NETWORK: NetworkDataSource,
}


def _known_variants() -> list:
    return [variant.__name__ for variant in _FACTORIES]


def _resolve_variant(target: DataSourceTarget) -> Type[DataSource]:
    """Map a class or tag onto one of the known variant classes."""
    if isinstance(target, type):
        if target in _FACTORIES:
            return target
        raise UnrecognizedVariantError(target, _known_variants())

    if isinstance(target, str):
        try:
            return _TAGS[DataSourceType(target)]
        except ValueError:
            raise UnrecognizedVariantError(target, _known_variants()) from None

    raise UnrecognizedVariantError(target, _known_variants())
