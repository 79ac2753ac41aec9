"""Factory Method demonstration.

``Country`` is a closed union of four variants and ``CurrencyFactory`` maps
each of them to its ``Currency``. ``Canada`` and ``Spain`` carry no payload
and are exposed as singleton values; ``Greece`` and ``USA`` carry a
``some_property`` string that plays no part in the mapping.
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from creational_patterns.domain.core.exceptions import UnreachableVariantError
from creational_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Country:
    """Closed union of the supported countries.

    Only the variants declared in this module may subclass it.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(
                f"Country is a closed union; {cls.__qualname__} cannot extend it"
            )


class _SingletonCountry(Country):
    """Payload-free variant with exactly one instance."""

    _instance = None

    def __new__(cls):
        if cls.__dict__.get("_instance") is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __reduce__(self):
        return self.__class__, ()

    def __repr__(self) -> str:
        return self.__class__.__name__[:-len("Type")]


class CanadaType(_SingletonCountry):
    pass


class SpainType(_SingletonCountry):
    pass


@dataclass(frozen=True)
class Greece(Country):
    some_property: str


@dataclass(frozen=True)
class USA(Country):
    some_property: str


Canada = CanadaType()
Spain = SpainType()

COUNTRY_VARIANTS = (CanadaType, SpainType, Greece, USA)


class Currency(BaseModel):
    """Currency identified by its ISO 4217 code."""
    model_config = ConfigDict(frozen=True)

    code: str = Field(..., pattern=r"^[A-Z]{3}$", description="ISO 4217 currency code")

    def __str__(self) -> str:
        return self.code


class CurrencyFactory:
    """Stateless factory mapping a Country to its Currency."""

    @staticmethod
    def currency_for_country(country: Country) -> Currency:
        """
        Get the currency used in a country.

        Args:
            country: Any Country variant; payloads are ignored.

        Returns:
            Currency for the country.

        Raises:
            UnreachableVariantError: If ``country`` is not a Country variant.
        """
        if isinstance(country, SpainType):
            currency = Currency(code="EUR")
        elif isinstance(country, Greece):
            currency = Currency(code="EUR")
        elif isinstance(country, USA):
            currency = Currency(code="USD")
        elif isinstance(country, CanadaType):
            currency = Currency(code="CAD")
        else:
            raise UnreachableVariantError("Country", country)

        logger.debug("Resolved currency", country=type(country).__name__, currency=currency.code)
        return currency


currency_for_country = CurrencyFactory.currency_for_country
