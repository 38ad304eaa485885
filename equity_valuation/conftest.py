import pytest

from equity_valuation.domain.types import CompanyFinancials
from equity_valuation.domain.types import DCFAssumptions
from equity_valuation.domain.types import StoreKPIInputs
from equity_valuation.scenarios.config import ValuationConfig


@pytest.fixture
def default_config() -> ValuationConfig:
  """Built-in plan configuration."""
  return ValuationConfig.default()


@pytest.fixture
def plan_financials() -> CompanyFinancials:
  """FY2025 plan snapshot used across tests."""
  return CompanyFinancials(
      price=95900.0,
      shares=341_149_107.0,
      plan_npat_bn=1959.65,
      plan_revenue_bn=31606.954,
      npat_9m_bn=1610.0,
      cash_bn=4122.714,
      htm_bn=1020.17,
      borrow_bn=3341.542,
      total_equity_bn=11256.955,
  )


@pytest.fixture
def base_kpi() -> StoreKPIInputs:
  """Plan KPIs: 429 stores, 20 net openings, 70% ramp."""
  return StoreKPIInputs(start_stores=429,
                        net_new_stores=20,
                        ramp=0.7,
                        sssg_delta=0.0,
                        op_leverage=1.0)


@pytest.fixture
def simple_dcf() -> DCFAssumptions:
  """Round-number DCF inputs that can be checked by hand.

  10% growth on ROC 20% gives 50% reinvestment; with WACC 10% every
  explicit-year PV equals year-1 FCFF / 1.1 = 8.0.
  """
  return DCFAssumptions(
      base_revenue_bn=100.0,
      cagr=0.10,
      ebit_margin=0.20,
      tax_rate=0.20,
      roc=0.20,
      wacc=0.10,
      terminal_growth=0.03,
      net_cash_bn=0.0,
      shares=1e9,
  )
