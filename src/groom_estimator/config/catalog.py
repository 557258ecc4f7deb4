"""Price catalog — breeds with per-service base prices, plus flat add-ons."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

Price = Annotated[float, Field(ge=0)]


class BreedPriceEntry(BaseModel):
    """One breed and the base price of each service it is offered with."""

    model_config = ConfigDict(frozen=True)

    breed: str = Field(description="Breed name, unique within the catalog")
    prices: dict[str, Price | None] = Field(
        default_factory=dict,
        description="Service key → base price. A missing key or null value "
                    "means the service is not offered for this breed.",
    )


class AddonEntry(BaseModel):
    """One optional extra service.

    ``prices`` may list several tiers but only the first is ever charged.
    """

    model_config = ConfigDict(frozen=True)

    addon: str = Field(description="Add-on name, unique within the catalog")
    prices: list[Price] = Field(
        default_factory=list,
        description="Price tiers; the first tier is the flat price used for estimates",
    )

    @property
    def price(self) -> float:
        return self.prices[0] if self.prices else 0.0


class Catalog(BaseModel):
    """Read-only reference data for one estimator session."""

    model_config = ConfigDict(frozen=True)

    breeds: list[BreedPriceEntry] = Field(default_factory=list)
    addons: list[AddonEntry] = Field(default_factory=list)

    def find_breed(self, name: str) -> BreedPriceEntry | None:
        for entry in self.breeds:
            if entry.breed == name:
                return entry
        return None

    def find_addon(self, name: str) -> AddonEntry | None:
        for entry in self.addons:
            if entry.addon == name:
                return entry
        return None

    def breed_names(self) -> list[str]:
        return [entry.breed for entry in self.breeds]

    def addon_names(self) -> list[str]:
        return [entry.addon for entry in self.addons]
