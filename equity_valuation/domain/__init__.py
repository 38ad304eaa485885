"""Domain types and clamp helpers for the valuation engine."""

from equity_valuation.domain.types import BaselineMetrics
from equity_valuation.domain.types import BlendedValuation
from equity_valuation.domain.types import CompanyFinancials
from equity_valuation.domain.types import DCFAssumptions
from equity_valuation.domain.types import DCFResult
from equity_valuation.domain.types import MethodWeight
from equity_valuation.domain.types import PolicyOutput
from equity_valuation.domain.types import ScenarioResult
from equity_valuation.domain.types import ScenarioSpec
from equity_valuation.domain.types import StoreDCFSeriesParams
from equity_valuation.domain.types import StoreKPIInputs
from equity_valuation.domain.types import StoreRevenuePath
from equity_valuation.domain.types import ValuationReport

__all__ = [
    'BaselineMetrics',
    'BlendedValuation',
    'CompanyFinancials',
    'DCFAssumptions',
    'DCFResult',
    'MethodWeight',
    'PolicyOutput',
    'ScenarioResult',
    'ScenarioSpec',
    'StoreDCFSeriesParams',
    'StoreKPIInputs',
    'StoreRevenuePath',
    'ValuationReport',
]
