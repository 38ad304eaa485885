"""
Policy registry for mapping string names to policy factories.

This keeps ValuationConfig JSON friendly (revenue_model is a plain string)
while still instantiating the correct policy classes.

To add a new revenue model:
1. Implement the policy class in policies/revenue.py
2. Add a factory function here taking (config, kpi, store_start)
3. Register it in REVENUE_POLICIES
"""

from collections.abc import Callable

from equity_valuation.domain.types import StoreKPIInputs
from equity_valuation.policies.discount import SpreadGuardedWACC
from equity_valuation.policies.discount import WACCPolicy
from equity_valuation.policies.revenue import CAGRRevenue
from equity_valuation.policies.revenue import RevenuePolicy
from equity_valuation.policies.revenue import StorePathRevenue
from equity_valuation.scenarios.config import ValuationConfig

RevenueFactory = Callable[[ValuationConfig, StoreKPIInputs, float],
                          RevenuePolicy]


def _cagr(config: ValuationConfig, kpi: StoreKPIInputs,
          store_start: float) -> RevenuePolicy:
  del kpi, store_start
  return CAGRRevenue(cagr=config.cagr)


def _store_path(config: ValuationConfig, kpi: StoreKPIInputs,
                store_start: float) -> RevenuePolicy:
  # Scenario-aware: net-new stores and ramp come from the scenario's KPIs,
  # absolute SSSG is the base SSSG shifted by the scenario delta.
  return StorePathRevenue(
      retail_share=config.retail_share,
      other_cagr=config.other_cagr,
      store_start=store_start,
      net_new_per_year=kpi.net_new_stores,
      ramp=kpi.ramp,
      sssg_abs=config.base_sssg + kpi.sssg_delta,
  )


REVENUE_POLICIES: dict[str, RevenueFactory] = {
    'cagr': _cagr,
    'store_path': _store_path,
}


def create_revenue_policy(
    config: ValuationConfig,
    kpi: StoreKPIInputs,
    store_start: float,
) -> RevenuePolicy:
  """
  Create the revenue policy named by config.revenue_model.

  Args:
    config: Valuation configuration
    kpi: Store KPI inputs of the active scenario
    store_start: Store count the store path starts from

  Returns:
    RevenuePolicy instance

  Raises:
    KeyError: If the revenue model name is not in the registry
  """
  try:
    factory = REVENUE_POLICIES[config.revenue_model]
  except KeyError as e:
    raise KeyError(f"Unknown revenue model: '{config.revenue_model}'. "
                   f'Available: {list(REVENUE_POLICIES.keys())}') from e
  return factory(config, kpi, store_start)


def create_wacc_policy(config: ValuationConfig) -> WACCPolicy:
  return SpreadGuardedWACC(wacc=config.wacc)


def list_revenue_models() -> list[str]:
  """List available revenue model names."""
  return list(REVENUE_POLICIES.keys())
