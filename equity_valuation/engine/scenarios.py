'''
Bear/Base/Bull scenario fan-out.

Each scenario is an independent ScenarioSpec record passed through the same
pure functions; nothing is shared between rows.
'''

from collections.abc import Sequence
from typing import List

from equity_valuation.domain.types import BN
from equity_valuation.domain.types import CompanyFinancials
from equity_valuation.domain.types import ScenarioResult
from equity_valuation.domain.types import ScenarioSpec
from equity_valuation.domain.types import StoreKPIInputs
from equity_valuation.engine.baseline import price_from_pe
from equity_valuation.engine.store_kpi import store_driven_scenario

DRIVER_STORE = 'STORE'
DRIVER_EPS = 'EPS'
DEFAULT_SCENARIO = 'Base'


def _upside(target_price: float, price: float) -> float:
  return target_price / price - 1 if price > 0 else 0.0


def store_scenario_row(
    financials: CompanyFinancials,
    base_kpi: StoreKPIInputs,
    spec: ScenarioSpec,
) -> ScenarioResult:
  '''Scenario row with EPS derived from the store KPI model.'''
  out = store_driven_scenario(
      plan_revenue_bn=financials.plan_revenue_bn,
      plan_npat_bn=financials.plan_npat_bn,
      shares=financials.shares,
      base=base_kpi,
      scenario=spec.kpi,
  )
  tp = price_from_pe(out.eps, spec.pe)
  return ScenarioResult(
      name=spec.name,
      driver=DRIVER_STORE,
      pe=spec.pe,
      eps_vs_plan=out.eps_vs_plan,
      npat_bn=out.npat_bn,
      eps=out.eps,
      target_price=tp,
      upside=_upside(tp, financials.price),
      q4_required_npat_bn=out.npat_bn - financials.npat_9m_bn,
      revenue_bn=out.revenue_bn,
      stores_start=spec.kpi.start_stores,
      stores_end=out.end_stores,
      net_new_stores=spec.kpi.net_new_stores,
      avg_stores_eff=out.avg_stores_eff,
      sssg_delta=spec.kpi.sssg_delta,
  )


def eps_scenario_row(
    financials: CompanyFinancials,
    spec: ScenarioSpec,
) -> ScenarioResult:
  '''Scenario row with EPS set directly as a change vs plan.'''
  npat = financials.plan_npat_bn * (1 + spec.eps_vs_plan)
  eps = npat * BN / financials.shares if financials.shares > 0 else 0.0
  tp = price_from_pe(eps, spec.pe)
  return ScenarioResult(
      name=spec.name,
      driver=DRIVER_EPS,
      pe=spec.pe,
      eps_vs_plan=spec.eps_vs_plan,
      npat_bn=npat,
      eps=eps,
      target_price=tp,
      upside=_upside(tp, financials.price),
      q4_required_npat_bn=npat - financials.npat_9m_bn,
  )


def build_scenario_table(
    financials: CompanyFinancials,
    base_kpi: StoreKPIInputs,
    specs: Sequence[ScenarioSpec],
    use_store_kpi: bool = True,
) -> List[ScenarioResult]:
  '''
  Build the scenario table in the order of specs.

  Args:
    financials: Company snapshot
    base_kpi: Store KPI inputs the plan is anchored to
    specs: Scenario definitions (usually Bear, Base, Bull)
    use_store_kpi: Derive EPS from store KPIs (True) or from eps_vs_plan

  Returns:
    One ScenarioResult per spec
  '''
  if use_store_kpi:
    return [store_scenario_row(financials, base_kpi, s) for s in specs]
  return [eps_scenario_row(financials, s) for s in specs]


def pick_scenario(table: Sequence[ScenarioResult],
                  name: str) -> ScenarioResult:
  '''Return the named row, falling back to Base, then to the middle row.'''
  by_name = {r.name: r for r in table}
  if name in by_name:
    return by_name[name]
  if DEFAULT_SCENARIO in by_name:
    return by_name[DEFAULT_SCENARIO]
  return table[len(table) // 2]
