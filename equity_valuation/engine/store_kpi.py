'''
Store KPI scenario model.

Turns store-count and same-store-sales assumptions into a revenue and NPAT
scenario. The scenario is anchored to the company plan: KPI deltas only
scale the planned revenue and NPAT, they never forecast from scratch.
'''

from equity_valuation.domain.clamps import clamp_op_leverage
from equity_valuation.domain.clamps import clamp_ramp
from equity_valuation.domain.clamps import clamp_sssg_delta
from equity_valuation.domain.types import BN
from equity_valuation.domain.types import StoreKPIInputs
from equity_valuation.domain.types import StoreScenarioOutput

EPSILON_STORES = 1e-6


def effective_avg_stores(start_stores: float, net_new_stores: float,
                         ramp: float) -> float:
  '''
  Average productive store count over a 12-month window.

  New stores open evenly through the year, so on average half of them are
  open, and each contributes only `ramp` of a mature store's revenue.
  '''
  return max(0.0, start_stores) + (net_new_stores / 2) * clamp_ramp(ramp)


def _effective(kpi: StoreKPIInputs) -> float:
  return effective_avg_stores(kpi.start_stores, kpi.net_new_stores, kpi.ramp)


def store_driven_scenario(
    plan_revenue_bn: float,
    plan_npat_bn: float,
    shares: float,
    base: StoreKPIInputs,
    scenario: StoreKPIInputs,
) -> StoreScenarioOutput:
  '''
  Derive one scenario's revenue and earnings from its store KPIs.

  Revenue scales with the ratio of effective average stores to the plan's
  and with the SSSG delta. NPAT follows revenue raised to the operating
  leverage exponent (> 1: fixed-cost leverage, < 1: flexible costs).

  Args:
    plan_revenue_bn: Planned revenue
    plan_npat_bn: Planned NPAT
    shares: Shares outstanding
    base: KPI inputs the plan was built on
    scenario: KPI inputs of the scenario

  Returns:
    StoreScenarioOutput with finite, non-negative store counts and revenue
  '''
  base_eff = max(EPSILON_STORES, _effective(base))
  scen_eff = max(0.0, _effective(scenario))

  sssg_delta = clamp_sssg_delta(scenario.sssg_delta)
  revenue = plan_revenue_bn * (scen_eff / base_eff) * (1 + sssg_delta)

  rev_ratio = max(0.0, revenue /
                  plan_revenue_bn) if plan_revenue_bn > 0 else 0.0
  npat = plan_npat_bn * rev_ratio**clamp_op_leverage(scenario.op_leverage)

  eps = npat * BN / shares if shares > 0 else 0.0
  eps_vs_plan = npat / plan_npat_bn - 1 if plan_npat_bn > 0 else 0.0

  return StoreScenarioOutput(
      end_stores=max(0.0, scenario.start_stores + scenario.net_new_stores),
      avg_stores_eff=scen_eff,
      revenue_bn=revenue,
      npat_bn=npat,
      eps=eps,
      eps_vs_plan=eps_vs_plan,
      rev_ratio=rev_ratio,
  )
