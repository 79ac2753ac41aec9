"""Creational Patterns - Root Package.

This package collects small, self-contained demonstrations of classic
creational design patterns, each paired with a unit test that exercises it.

Key Components:
    - creational.abstract_factory: DataSource capability and the
      DataSourceFactory selector
    - creational.factory_method: closed Country union and CurrencyFactory
    - domain.core.exceptions: error types raised by the factories
    - config / infrastructure.logging: configuration and structured logging

Usage:
    >>> from creational_patterns import DataSourceFactory, NetworkDataSource
    >>> DataSourceFactory.create_factory(NetworkDataSource).make_data_source()
    NetworkDataSource()
    >>> from creational_patterns import CurrencyFactory, Spain
    >>> CurrencyFactory.currency_for_country(Spain).code
    'EUR'
"""

from ._package import PACKAGE_NAME, __version__
from .creational.abstract_factory import (
    DataSource,
    DatabaseDataSource,
    NetworkDataSource,
    DataSourceType,
    DataSourceFactory,
    DatabaseFactory,
    NetworkFactory,
)
from .creational.factory_method import (
    Country,
    Canada,
    Spain,
    Greece,
    USA,
    Currency,
    CurrencyFactory,
    COUNTRY_VARIANTS,
    currency_for_country,
)
from .domain.core.exceptions import (
    DomainException,
    UnrecognizedVariantError,
    UnreachableVariantError,
)

__package_name__ = PACKAGE_NAME

__all__ = [
    "__version__",
    # Abstract Factory
    "DataSource",
    "DatabaseDataSource",
    "NetworkDataSource",
    "DataSourceType",
    "DataSourceFactory",
    "DatabaseFactory",
    "NetworkFactory",
    # Factory Method
    "Country",
    "Canada",
    "Spain",
    "Greece",
    "USA",
    "Currency",
    "CurrencyFactory",
    "COUNTRY_VARIANTS",
    "currency_for_country",
    # Errors
    "DomainException",
    "UnrecognizedVariantError",
    "UnreachableVariantError",
]
