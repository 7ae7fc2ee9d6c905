"""Statistical helpers for the NYPD Shooting borough analysis."""

from .population import (
    NYC_BOROUGH_POPULATION,
    normalize_borough,
    PopulationWeight,
    PopulationWeights,
    nyc_borough_weights,
)
from .proportion_test import (
    CategoryObservation,
    CategoryResult,
    ProportionTestResult,
    ProportionTester,
    chi_squared_proportion_test,
    count_observations,
    round_half_away,
)

__all__ = [
    'NYC_BOROUGH_POPULATION',
    'normalize_borough',
    'PopulationWeight',
    'PopulationWeights',
    'nyc_borough_weights',
    'CategoryObservation',
    'CategoryResult',
    'ProportionTestResult',
    'ProportionTester',
    'chi_squared_proportion_test',
    'count_observations',
    'round_half_away',
]
