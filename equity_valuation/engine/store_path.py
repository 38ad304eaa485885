'''
Store-driven revenue path for the DCF.

Base-year revenue is split into a store-linked share and a residual. The
store-linked part is backed out into a "mature revenue per effective store"
constant and grown with the store count and a compounding SSSG; the residual
grows at its own CAGR.
'''

import math

from equity_valuation.domain.clamps import clamp_other_cagr
from equity_valuation.domain.clamps import clamp_ramp
from equity_valuation.domain.clamps import clamp_retail_share
from equity_valuation.domain.clamps import clamp_sssg
from equity_valuation.domain.types import N_YEARS
from equity_valuation.domain.types import StoreDCFRow
from equity_valuation.domain.types import StoreDCFSeriesParams
from equity_valuation.domain.types import StoreRevenuePath
from equity_valuation.engine.store_kpi import EPSILON_STORES
from equity_valuation.engine.store_kpi import effective_avg_stores


def build_store_revenue_path(
    params: StoreDCFSeriesParams,
    n_years: int = N_YEARS,
) -> StoreRevenuePath:
  '''
  Build the year-by-year store-driven revenue path.

  Per year t (1..n_years), the average effective store count is taken from
  the running year-start count, and SSSG compounds from the base year:

    retail_t = mature_per_store * (stores_start_t + nn/2 * ramp) * (1+sssg)^t
    other_t  = base_other * (1+other_cagr)^t

  Args:
    params: Store path inputs
    n_years: Number of forecast years (default: 5)

  Returns:
    StoreRevenuePath with one row per year and the implied CAGR
  '''
  retail_share = clamp_retail_share(params.retail_share)
  other_share = 1 - retail_share

  store_start = max(0, math.floor(params.store_start))
  nn = math.floor(params.net_new_per_year)
  ramp = clamp_ramp(params.ramp)

  sssg = clamp_sssg(params.sssg_abs)
  other_cagr = clamp_other_cagr(params.other_cagr)

  base_eff = max(EPSILON_STORES, effective_avg_stores(store_start, nn, ramp))
  other_base = params.base_revenue_bn * other_share
  mature_per_store = params.base_revenue_bn * retail_share / base_eff

  rows = []
  prev_total = params.base_revenue_bn

  for t in range(1, n_years + 1):
    stores_start = store_start + nn * (t - 1)
    avg_stores_eff = stores_start + (nn / 2) * ramp

    retail = mature_per_store * avg_stores_eff * (1 + sssg)**t
    other = other_base * (1 + other_cagr)**t
    total = retail + other

    rows.append(
        StoreDCFRow(
            year=params.base_year + t,
            stores_start=stores_start,
            stores_end=stores_start + nn,
            avg_stores_eff=avg_stores_eff,
            sssg_abs=sssg,
            retail_revenue_bn=retail,
            other_revenue_bn=other,
            revenue_bn=total,
            yoy=total / prev_total - 1 if prev_total > 0 else 0.0,
        ))
    prev_total = total

  implied_cagr = 0.0
  if params.base_revenue_bn > 0 and rows:
    ratio = rows[-1].revenue_bn / params.base_revenue_bn
    implied_cagr = max(0.0, ratio)**(1 / n_years) - 1

  return StoreRevenuePath(rows=rows, implied_cagr=implied_cagr)
