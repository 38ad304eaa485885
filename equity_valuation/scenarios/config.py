"""
Configuration for a valuation run.

ValuationConfig is a serializable (JSON-friendly) dataclass holding every
user-editable input of a run: company figures, DCF drivers, store KPI
assumptions, scenario multiples and method weights. The presentation layer
edits it; the engine only ever sees the domain records built from it.
"""

from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import field
import json
from pathlib import Path
from typing import Any, Optional

from equity_valuation.domain.types import CompanyFinancials
from equity_valuation.domain.types import DCFAssumptions
from equity_valuation.domain.types import MethodWeight
from equity_valuation.domain.types import ScenarioSpec
from equity_valuation.domain.types import StoreKPIInputs


@dataclass
class ValuationConfig:
  """
  Inputs of one valuation run.

  Monetary stock/flow figures are in billion VND, price in VND/share.
  revenue_model names a factory in the registry ('store_path' or 'cagr').
  actual_stores_by_quarter holds the store counts reported so far this year
  (None for quarters not yet reported).
  """
  name: str = 'default'
  ticker: str = 'PNJ'

  # Company snapshot
  price: float = 95900.0
  shares: float = 341_149_107.0
  plan_npat_bn: float = 1959.65
  npat_9m_bn: float = 1610.0
  plan_revenue_bn: float = 31606.954
  cash_bn: float = 4122.714
  htm_bn: float = 1020.17
  borrow_bn: float = 3341.542
  total_equity_bn: float = 11256.955
  base_year: int = 2025

  # DCF drivers
  tax_rate: float = 0.2
  ebit_margin: float = 0.07
  cagr: float = 0.08
  terminal_growth: float = 0.03
  roc: float = 0.18
  wacc: float = 0.09

  # Store-driven DCF revenue
  revenue_model: str = 'store_path'
  retail_share: float = 0.85
  base_sssg: float = 0.04
  other_cagr: float = 0.03

  # CAPM (informational)
  rf: float = 0.0418
  beta: float = 0.52
  erp: float = 0.083455

  pb_multiple: float = 2.8

  # Scenario multiples and EPS overrides
  bear_pe: float = 15.0
  base_pe: float = 17.0
  bull_pe: float = 19.0
  bear_eps_vs_plan: float = -0.08
  base_eps_vs_plan: float = 0.0
  bull_eps_vs_plan: float = 0.10
  active_scenario: str = 'Base'

  # Store KPI driver
  use_store_kpi: bool = True
  start_stores: float = 429.0
  bear_net_new_stores: float = 10.0
  base_net_new_stores: float = 20.0
  bull_net_new_stores: float = 30.0
  bear_sssg_delta: float = -0.02
  base_sssg_delta: float = 0.0
  bull_sssg_delta: float = 0.03
  new_store_ramp: float = 0.7
  op_leverage: float = 1.0
  actual_stores_by_quarter: list[Optional[float]] = field(
      default_factory=lambda: [None, None, None, None])

  # Method toggles and weights
  use_pe: bool = True
  use_dcf: bool = True
  use_pb: bool = True
  weight_pe: float = 60.0
  weight_dcf: float = 30.0
  weight_pb: float = 10.0

  @classmethod
  def default(cls) -> 'ValuationConfig':
    """
    Default configuration from the company's FY2025 plan.

    Uses:
      - Store-driven DCF revenue (85% retail share, 4% SSSG)
      - Store KPI driver for scenario EPS
      - P/E 15x / 17x / 19x for Bear / Base / Bull
      - Weights 60% P/E, 30% DCF, 10% P/B
    """
    return cls()

  @classmethod
  def cagr_revenue(cls) -> 'ValuationConfig':
    """Scenario with a flat CAGR revenue path in the DCF."""
    return cls(name='cagr_revenue', revenue_model='cagr')

  @classmethod
  def eps_driven(cls) -> 'ValuationConfig':
    """Scenario EPS from the EPS-vs-plan overrides instead of store KPIs."""
    return cls(name='eps_driven', use_store_kpi=False)

  def financials(self) -> CompanyFinancials:
    return CompanyFinancials(
        price=self.price,
        shares=self.shares,
        plan_npat_bn=self.plan_npat_bn,
        plan_revenue_bn=self.plan_revenue_bn,
        npat_9m_bn=self.npat_9m_bn,
        cash_bn=self.cash_bn,
        htm_bn=self.htm_bn,
        borrow_bn=self.borrow_bn,
        total_equity_bn=self.total_equity_bn,
    )

  def store_kpi(self, scenario: str) -> StoreKPIInputs:
    """Store KPI inputs for one scenario ('Bear', 'Base' or 'Bull')."""
    prefix = scenario.lower()
    try:
      net_new = getattr(self, f'{prefix}_net_new_stores')
      sssg_delta = getattr(self, f'{prefix}_sssg_delta')
    except AttributeError as e:
      raise KeyError(f"Unknown scenario: '{scenario}'. "
                     "Available: ['Bear', 'Base', 'Bull']") from e
    return StoreKPIInputs(
        start_stores=self.start_stores,
        net_new_stores=net_new,
        ramp=self.new_store_ramp,
        sssg_delta=sssg_delta,
        op_leverage=self.op_leverage,
    )

  def base_kpi(self) -> StoreKPIInputs:
    """KPI inputs the company plan is anchored to."""
    return self.store_kpi('Base')

  def scenario_specs(self) -> list[ScenarioSpec]:
    """Bear, Base and Bull definitions, in that order."""
    return [
        ScenarioSpec(name='Bear', pe=self.bear_pe,
                     eps_vs_plan=self.bear_eps_vs_plan,
                     kpi=self.store_kpi('Bear')),
        ScenarioSpec(name='Base', pe=self.base_pe,
                     eps_vs_plan=self.base_eps_vs_plan,
                     kpi=self.store_kpi('Base')),
        ScenarioSpec(name='Bull', pe=self.bull_pe,
                     eps_vs_plan=self.bull_eps_vs_plan,
                     kpi=self.store_kpi('Bull')),
    ]

  def dcf_assumptions(self, net_cash_bn: float) -> DCFAssumptions:
    """DCF assumptions without a revenue path (the policy supplies it)."""
    return DCFAssumptions(
        base_revenue_bn=self.plan_revenue_bn,
        cagr=self.cagr,
        ebit_margin=self.ebit_margin,
        tax_rate=self.tax_rate,
        roc=self.roc,
        wacc=self.wacc,
        terminal_growth=self.terminal_growth,
        net_cash_bn=net_cash_bn,
        shares=self.shares,
        base_year=self.base_year,
    )

  def method_weights(self) -> tuple[MethodWeight, MethodWeight, MethodWeight]:
    """P/E, DCF and P/B weights with their toggles."""
    return (
        MethodWeight(weight=self.weight_pe, enabled=self.use_pe),
        MethodWeight(weight=self.weight_dcf, enabled=self.use_dcf),
        MethodWeight(weight=self.weight_pb, enabled=self.use_pb),
    )

  def to_dict(self) -> dict[str, Any]:
    """Convert to dictionary."""
    return asdict(self)

  def to_json(self) -> str:
    """Serialize to JSON string."""
    return json.dumps(self.to_dict(), indent=2)

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> 'ValuationConfig':
    """Create from dictionary."""
    return cls(**data)

  @classmethod
  def from_json(cls, json_str: str) -> 'ValuationConfig':
    """Create from JSON string."""
    return cls.from_dict(json.loads(json_str))

  @classmethod
  def from_json_file(cls, path: Path) -> 'ValuationConfig':
    """Load from a JSON file; keys not given keep their defaults."""
    if not path.exists():
      raise FileNotFoundError(f'Config file not found: {path}')
    return cls.from_json(path.read_text(encoding='utf-8'))
