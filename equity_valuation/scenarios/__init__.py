"""Run configuration and policy registry."""

from equity_valuation.scenarios.config import ValuationConfig
from equity_valuation.scenarios.registry import REVENUE_POLICIES
from equity_valuation.scenarios.registry import create_revenue_policy
from equity_valuation.scenarios.registry import create_wacc_policy
from equity_valuation.scenarios.registry import list_revenue_models

__all__ = [
  'ValuationConfig',
  'REVENUE_POLICIES',
  'create_revenue_policy',
  'create_wacc_policy',
  'list_revenue_models',
]
