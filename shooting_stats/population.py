"""Population reference weights for grouping incidents by NYC borough."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from shooting_data.utils.exceptions import InvalidInput, MissingData


# 2020 Decennial Census, one entry per borough as labelled in the NYPD BORO field.
NYC_BOROUGH_POPULATION: Dict[str, int] = {
    "BRONX": 1472654,
    "BROOKLYN": 2736074,
    "MANHATTAN": 1694251,
    "QUEENS": 2405464,
    "STATEN ISLAND": 495747,
}


def normalize_borough(name: Optional[str]) -> str:
    """Map a raw borough label to its key in NYC_BOROUGH_POPULATION."""
    if name is None or not str(name).strip():
        raise MissingData("Borough label is empty")
    key = " ".join(str(name).upper().split())
    if key not in NYC_BOROUGH_POPULATION:
        raise MissingData(f"Unknown borough: {name!r}")
    return key


@dataclass(frozen=True)
class PopulationWeight:
    category: str
    population: int


class PopulationWeights:
    """Validated category -> population mapping.

    Built once and reused for every share/expected-count lookup. Categories
    must be unique and every population a positive integer.
    """

    def __init__(self, weights: Iterable[PopulationWeight]) -> None:
        entries: Dict[str, PopulationWeight] = {}
        for weight in weights:
            if weight.category in entries:
                raise InvalidInput(f"Duplicate population entry for {weight.category!r}")
            if isinstance(weight.population, bool) or not isinstance(weight.population, Integral):
                raise InvalidInput(f"Population for {weight.category!r} must be an integer")
            if weight.population <= 0:
                raise InvalidInput(f"Population for {weight.category!r} must be positive, got {weight.population}")
            entries[weight.category] = PopulationWeight(weight.category, int(weight.population))
        if not entries:
            raise InvalidInput("Population weights are empty")
        self._entries = entries
        self.total = sum(w.population for w in entries.values())

    @classmethod
    def from_mapping(cls, populations: Mapping[str, int]) -> "PopulationWeights":
        return cls(PopulationWeight(category, population) for category, population in populations.items())

    @property
    def categories(self) -> Tuple[str, ...]:
        return tuple(sorted(self._entries))

    def population(self, category: str) -> int:
        try:
            return self._entries[category].population
        except KeyError:
            raise MissingData(f"No population weight for category {category!r}") from None

    def share(self, category: str) -> float:
        return self.population(category) / self.total

    def __contains__(self, category: object) -> bool:
        return category in self._entries

    def __iter__(self) -> Iterator[PopulationWeight]:
        return (self._entries[c] for c in self.categories)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PopulationWeights({dict((w.category, w.population) for w in self)!r})"


def nyc_borough_weights() -> PopulationWeights:
    return PopulationWeights.from_mapping(NYC_BOROUGH_POPULATION)


__all__ = [
    "NYC_BOROUGH_POPULATION",
    "normalize_borough",
    "PopulationWeight",
    "PopulationWeights",
    "nyc_borough_weights",
]
