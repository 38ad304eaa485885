'''
Domain types for the valuation engine.

These dataclasses are the typed interfaces between the engine stages
(baseline -> store KPI scenario -> revenue path -> DCF -> blend). Input
records coerce every numeric field to a finite float on construction, so a
NaN or a non-numeric slider value degrades to 0 instead of poisoning the
arithmetic downstream.

Units: stock/flow figures in billion VND (suffix _bn), per-share figures in
VND/share.
'''

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, Generic, List, Optional, TypeVar

from equity_valuation.domain.clamps import safe_float

T = TypeVar('T')

BN = 1e9
N_YEARS = 5
SCENARIO_NAMES = ('Bear', 'Base', 'Bull')


def _coerce_floats(obj: Any) -> None:
  for f in fields(obj):
    if f.type is float:
      setattr(obj, f.name, safe_float(getattr(obj, f.name)))


@dataclass
class PolicyOutput(Generic[T]):
  '''
  Standard output from any policy.

  Attributes:
    value: The computed value (type depends on policy)
    diag: Dictionary of diagnostic information
  '''
  value: T
  diag: Dict[str, Any] = field(default_factory=dict)


@dataclass
class CompanyFinancials:
  '''
  Snapshot of the company figures a valuation run is anchored to.

  Attributes:
    price: Current market price (VND/share)
    shares: Shares outstanding
    plan_npat_bn: Planned full-year NPAT
    plan_revenue_bn: Planned full-year revenue
    npat_9m_bn: Actual NPAT for the first nine months
    cash_bn: Cash and equivalents
    htm_bn: Held-to-maturity investments
    borrow_bn: Short and long term borrowings
    total_equity_bn: Total shareholders' equity
  '''
  price: float
  shares: float
  plan_npat_bn: float
  plan_revenue_bn: float
  npat_9m_bn: float = 0.0
  cash_bn: float = 0.0
  htm_bn: float = 0.0
  borrow_bn: float = 0.0
  total_equity_bn: float = 0.0

  def __post_init__(self):
    _coerce_floats(self)


@dataclass
class StoreKPIInputs:
  '''
  Operating assumptions for one store scenario over the next 12 months.

  Attributes:
    start_stores: Store count at the start of the window
    net_new_stores: Net stores opened over the window
    ramp: Productivity of a new store relative to a mature one (0..1)
    sssg_delta: Same-store-sales growth relative to plan (e.g. -0.02)
    op_leverage: Exponent linking NPAT to revenue (0.5..2.0)
  '''
  start_stores: float
  net_new_stores: float
  ramp: float = 0.7
  sssg_delta: float = 0.0
  op_leverage: float = 1.0

  def __post_init__(self):
    _coerce_floats(self)


@dataclass
class StoreDCFSeriesParams:
  '''
  Inputs for the store-driven five-year revenue path.

  Attributes:
    base_revenue_bn: Base-year revenue
    retail_share: Fraction of revenue driven by stores (0..1)
    other_cagr: Growth of the non-store revenue
    store_start: Store count at the end of the base year
    net_new_per_year: Net new stores opened each forecast year
    ramp: First-year productivity of new stores (0..1)
    sssg_abs: Absolute same-store-sales growth per year
    base_year: Calendar year of base_revenue_bn
  '''
  base_revenue_bn: float
  retail_share: float
  other_cagr: float
  store_start: float
  net_new_per_year: float
  ramp: float
  sssg_abs: float
  base_year: int = 2025

  def __post_init__(self):
    _coerce_floats(self)


@dataclass
class DCFAssumptions:
  '''
  Inputs for the FCFF engine.

  If revenue_path holds exactly N_YEARS entries it is used as the explicit
  revenue forecast; otherwise the path is generated from base_revenue_bn
  compounding at cagr.
  '''
  base_revenue_bn: float
  cagr: float
  ebit_margin: float
  tax_rate: float
  roc: float
  wacc: float
  terminal_growth: float
  net_cash_bn: float
  shares: float
  revenue_path: Optional[List[float]] = None
  base_year: int = 2025

  def __post_init__(self):
    _coerce_floats(self)
    if self.revenue_path is not None:
      self.revenue_path = [safe_float(r) for r in self.revenue_path]


@dataclass
class ScenarioSpec:
  '''
  One Bear/Base/Bull scenario definition.

  Attributes:
    name: Scenario name
    pe: Target P/E multiple
    eps_vs_plan: EPS change vs plan, used when the store KPI driver is off
    kpi: Store KPI inputs, used when the store KPI driver is on
  '''
  name: str
  pe: float
  eps_vs_plan: float
  kpi: StoreKPIInputs

  def __post_init__(self):
    _coerce_floats(self)


@dataclass
class BaselineMetrics:
  plan_eps: float
  forward_pe: float
  net_cash_bn: float
  bvps: float
  pb_value: float
  pb_current: float
  market_cap_bn: float


@dataclass
class StoreScenarioOutput:
  end_stores: float
  avg_stores_eff: float
  revenue_bn: float
  npat_bn: float
  eps: float
  eps_vs_plan: float
  rev_ratio: float


@dataclass
class ScenarioResult:
  '''
  One row of the scenario table consumed by the presentation layer.

  Store fields are None when the row was produced by the EPS driver.
  '''
  name: str
  driver: str
  pe: float
  eps_vs_plan: float
  npat_bn: float
  eps: float
  target_price: float
  upside: float
  q4_required_npat_bn: float
  revenue_bn: Optional[float] = None
  stores_start: Optional[float] = None
  stores_end: Optional[float] = None
  net_new_stores: Optional[float] = None
  avg_stores_eff: Optional[float] = None
  sssg_delta: Optional[float] = None

  def to_dict(self) -> Dict[str, Any]:
    return asdict(self)


@dataclass
class StoreDCFRow:
  year: int
  stores_start: float
  stores_end: float
  avg_stores_eff: float
  sssg_abs: float
  retail_revenue_bn: float
  other_revenue_bn: float
  revenue_bn: float
  yoy: float


@dataclass
class StoreRevenuePath:
  '''
  Store-driven revenue path.

  Attributes:
    rows: One StoreDCFRow per forecast year
    implied_cagr: CAGR from base revenue to the final year (display only)
  '''
  rows: List[StoreDCFRow]
  implied_cagr: float

  @property
  def revenues(self) -> List[float]:
    return [r.revenue_bn for r in self.rows]


@dataclass
class DCFYearRow:
  year: int
  t: int
  revenue_bn: float
  growth: float
  ebit_bn: float
  nopat_bn: float
  reinvestment_rate: float
  fcff_bn: float
  discount_factor: float
  pv_bn: float


@dataclass
class DCFResult:
  '''
  FCFF valuation result.

  Attributes:
    rows: Explicit-period rows
    pv_fcff_bn: Sum of explicit-period present values
    terminal_value_bn: Terminal value at the end of the explicit period
    pv_terminal_bn: Terminal value discounted to today
    enterprise_value_bn: pv_fcff_bn + pv_terminal_bn
    equity_value_bn: Enterprise value plus net cash
    value_per_share: Equity value per share (VND)
    wacc: Discount rate the result was computed with
  '''
  rows: List[DCFYearRow]
  pv_fcff_bn: float
  terminal_value_bn: float
  pv_terminal_bn: float
  enterprise_value_bn: float
  equity_value_bn: float
  value_per_share: float
  wacc: float

  def to_dict(self) -> Dict[str, Any]:
    '''Scalar summary, without the per-year rows.'''
    return {
        'pv_fcff_bn': self.pv_fcff_bn,
        'terminal_value_bn': self.terminal_value_bn,
        'pv_terminal_bn': self.pv_terminal_bn,
        'enterprise_value_bn': self.enterprise_value_bn,
        'equity_value_bn': self.equity_value_bn,
        'value_per_share': self.value_per_share,
        'wacc': self.wacc,
    }


@dataclass
class MethodWeight:
  weight: float
  enabled: bool = True

  def __post_init__(self):
    _coerce_floats(self)


@dataclass
class NormalizedWeights:
  pe: float
  dcf: float
  pb: float
  total: float


@dataclass
class BlendedValuation:
  '''
  Weighted blend of the three valuation methods.

  Attributes:
    pe_value: P/E-implied price of the active scenario
    dcf_value: DCF value per share
    pb_value: P/B-implied price
    weights: Normalized weights actually applied
    value: Blended fair value per share
    upside: value / current price - 1
  '''
  pe_value: float
  dcf_value: float
  pb_value: float
  weights: NormalizedWeights
  value: float
  upside: float


@dataclass
class ValuationReport:
  '''
  Complete output of one valuation run with diagnostics.

  Attributes:
    baseline: Baseline metrics
    scenarios: Bear/Base/Bull rows, in that order
    active: The scenario row feeding the blend
    store_path: Store-driven revenue path (None under the CAGR model)
    dcf: DCF result at the effective WACC
    blended: Blended valuation
    cost_of_equity: CAPM cost of equity (informational)
    diag: Merged diagnostics from all policies
  '''
  baseline: BaselineMetrics
  scenarios: List[ScenarioResult]
  active: ScenarioResult
  store_path: Optional[StoreRevenuePath]
  dcf: DCFResult
  blended: BlendedValuation
  cost_of_equity: float
  diag: Dict[str, Any] = field(default_factory=dict)

  def to_dict(self) -> Dict[str, Any]:
    '''Flatten headline figures into one dictionary.'''
    result = {
        'active_scenario': self.active.name,
        'plan_eps': self.baseline.plan_eps,
        'forward_pe': self.baseline.forward_pe,
        'net_cash_bn': self.baseline.net_cash_bn,
        'bvps': self.baseline.bvps,
        'pe_value': self.blended.pe_value,
        'dcf_value': self.blended.dcf_value,
        'pb_value': self.blended.pb_value,
        'weight_pe': self.blended.weights.pe,
        'weight_dcf': self.blended.weights.dcf,
        'weight_pb': self.blended.weights.pb,
        'blended_value': self.blended.value,
        'blended_upside': self.blended.upside,
        'cost_of_equity': self.cost_of_equity,
    }
    result.update({f'dcf_{k}': v for k, v in self.dcf.to_dict().items()})
    result.update(self.diag)
    return result
