"""Data models for beverages and customers."""

from abc import ABC, abstractmethod
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import ClassVar, Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

CENT = Decimal("0.01")

Extra = Literal["milk", "sugar", "syrup", "whipped_cream"]

EXTRA_PRICES: dict[str, Decimal] = {
    "milk": Decimal("0.50"),
    "sugar": Decimal("0.00"),
    "syrup": Decimal("0.60"),
    "whipped_cream": Decimal("0.70"),
}


def to_money(amount: Decimal) -> Decimal:
    """Round an amount to whole cents."""
    return Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


class Size(str, Enum):
    """Cup size offered for every beverage."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @property
    def multiplier(self) -> Decimal:
        return _SIZE_MULTIPLIERS[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()


_SIZE_MULTIPLIERS = {
    Size.SMALL: Decimal("0.8"),
    Size.MEDIUM: Decimal("1.0"),
    Size.LARGE: Decimal("1.2"),
}


class Customer(BaseModel):
    """Customer placing an order."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    name: str = Field(min_length=1)
    email: str | None = None
    phone: str | None = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("customer name must not be blank")
        return value


class Beverage(BaseModel, ABC):
    """A drink on the menu.

    Variants set ``menu_price`` for a medium cup and describe themselves via
    ``name()``. ``base_price`` overrides the menu price for the chosen size,
    e.g. for promotions or a location-specific price list.
    """

    model_config = ConfigDict(frozen=True)

    menu_price: ClassVar[Decimal]

    size: Size = Size.MEDIUM
    extras: frozenset[Extra] = frozenset()
    base_price: Decimal | None = Field(default=None, ge=0)

    @abstractmethod
    def name(self) -> str:
        """Display name of the drink."""
        pass

    def variant_surcharge(self) -> Decimal:
        """Variant-specific additions such as extra shots."""
        return Decimal("0")

    def extras_surcharge(self) -> Decimal:
        return sum((EXTRA_PRICES[extra] for extra in self.extras), Decimal("0"))

    def base_price_for_size(self) -> Decimal:
        if self.base_price is not None:
            return self.base_price
        return self.menu_price * self.size.multiplier

    def price(self) -> Decimal:
        """Price of one cup.

        Variant surcharges scale with the cup size like the menu price;
        extras are a flat addition.
        """
        sized_surcharge = self.variant_surcharge() * self.size.multiplier
        return to_money(self.base_price_for_size() + sized_surcharge + self.extras_surcharge())

    def description(self) -> str:
        return f"{self.name()} ({self.size.label})"


class Coffee(Beverage):
    """Brewed coffee with optional extra espresso shots."""

    menu_price: ClassVar[Decimal] = Decimal("3.50")
    shot_price: ClassVar[Decimal] = Decimal("0.75")

    extra_shots: int = Field(default=0, ge=0, le=4)

    def name(self) -> str:
        if self.extra_shots > 0:
            suffix = "s" if self.extra_shots > 1 else ""
            return f"Coffee (+{self.extra_shots} shot{suffix})"
        return "Coffee"

    def variant_surcharge(self) -> Decimal:
        return self.shot_price * self.extra_shots


class Tea(Beverage):
    """Hot tea of a given variety (Green, Black, Herbal, ...)."""

    menu_price: ClassVar[Decimal] = Decimal("2.50")

    variety: str = "Black"

    def name(self) -> str:
        return f"{self.variety} Tea"


class Smoothie(Beverage):
    """Fruit smoothie; every fruit beyond the first costs extra."""

    menu_price: ClassVar[Decimal] = Decimal("5.00")
    fruit_price: ClassVar[Decimal] = Decimal("0.50")

    fruits: tuple[str, ...] = ()

    def name(self) -> str:
        if not self.fruits:
            return "Smoothie"
        return f"Smoothie ({', '.join(self.fruits)})"

    def variant_surcharge(self) -> Decimal:
        return self.fruit_price * max(len(self.fruits) - 1, 0)
