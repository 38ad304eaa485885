"""
Pure FCFF DCF engine.

No I/O, just numeric computations. Reinvestment is tied to growth through
g = ROC * reinvestment_rate, so no separate capex or working-capital model
is needed.

Key functions:
  compute_fcff_valuation: Main entry point, computes value per share
  project_revenue_path: Explicit path or CAGR-generated path
  reinvestment_rate: Clamped g / ROC
  terminal_spread: Floored WACC - g for the perpetuity formula
  discount_factor: Guarded 1 / (1 + WACC)^t
"""

import logging
from collections.abc import Sequence
from typing import List, Optional

from equity_valuation.domain.clamps import clamp_reinvestment_rate
from equity_valuation.domain.types import BN
from equity_valuation.domain.types import N_YEARS
from equity_valuation.domain.types import DCFAssumptions
from equity_valuation.domain.types import DCFResult
from equity_valuation.domain.types import DCFYearRow

logger = logging.getLogger(__name__)

ROC_FLOOR = 1e-6
MIN_TERMINAL_SPREAD = 0.001


def project_revenue_path(
    base_revenue_bn: float,
    cagr: float,
    revenue_path: Optional[Sequence[float]] = None,
    n_years: int = N_YEARS,
) -> List[float]:
  """
  Resolve the explicit-period revenue path.

  Args:
    base_revenue_bn: Base-year revenue
    cagr: Fallback growth rate
    revenue_path: Optional explicit path; used only with exactly n_years
      entries
    n_years: Number of explicit years

  Returns:
    List of n_years revenues
  """
  if revenue_path is not None:
    if len(revenue_path) == n_years:
      return [float(r) for r in revenue_path]
    logger.debug('Ignoring revenue path of length %d (expected %d)',
                 len(revenue_path), n_years)
  return [base_revenue_bn * (1 + cagr)**t for t in range(1, n_years + 1)]


def reinvestment_rate(growth: float, roc: float) -> float:
  """Reinvestment rate implied by growth and return on capital."""
  return clamp_reinvestment_rate(growth / max(roc, ROC_FLOOR))


def terminal_spread(wacc: float, terminal_growth: float) -> float:
  return max(MIN_TERMINAL_SPREAD, wacc - terminal_growth)


def discount_factor(wacc: float, t: int) -> float:
  """1 / (1 + wacc)^t, or 0 when the discount base is not positive."""
  base = 1 + wacc
  return 1 / base**t if base > 0 else 0.0


def compute_fcff_valuation(a: DCFAssumptions) -> DCFResult:
  """
  Compute firm and equity value from a five-year FCFF projection.

  Stage 1: explicit years, each discounted at (1 + WACC)^t
  Stage 2: terminal value from year n+1 FCFF over (WACC - g), discounted
    back n periods

  Growth for year t is revenue_t / revenue_{t-1} - 1, with the base-year
  revenue as revenue_0; when the prior revenue is not positive the
  fallback CAGR is used instead.

  Args:
    a: DCF assumptions (WACC is used as given; apply the spread guard first)

  Returns:
    DCFResult with per-year rows and aggregates
  """
  revenues = project_revenue_path(a.base_revenue_bn, a.cagr, a.revenue_path)
  n_years = len(revenues)

  rows = []
  prev = a.base_revenue_bn
  for t, rev in enumerate(revenues, start=1):
    growth = rev / prev - 1 if prev > 0 else a.cagr
    ebit = rev * a.ebit_margin
    nopat = ebit * (1 - a.tax_rate)
    reinvest = reinvestment_rate(growth, a.roc)
    fcff = nopat * (1 - reinvest)
    df = discount_factor(a.wacc, t)

    rows.append(
        DCFYearRow(
            year=a.base_year + t,
            t=t,
            revenue_bn=rev,
            growth=growth,
            ebit_bn=ebit,
            nopat_bn=nopat,
            reinvestment_rate=reinvest,
            fcff_bn=fcff,
            discount_factor=df,
            pv_bn=fcff * df,
        ))
    prev = rev

  terminal_revenue = revenues[-1] * (1 + a.terminal_growth)
  terminal_nopat = terminal_revenue * a.ebit_margin * (1 - a.tax_rate)
  terminal_fcff = terminal_nopat * (
      1 - reinvestment_rate(a.terminal_growth, a.roc))

  tv = terminal_fcff / terminal_spread(a.wacc, a.terminal_growth)
  pv_tv = tv * discount_factor(a.wacc, n_years)

  pv_fcff = sum(r.pv_bn for r in rows)
  ev = pv_fcff + pv_tv
  equity = ev + a.net_cash_bn
  vps = equity * BN / a.shares if a.shares > 0 else 0.0

  return DCFResult(
      rows=rows,
      pv_fcff_bn=pv_fcff,
      terminal_value_bn=tv,
      pv_terminal_bn=pv_tv,
      enterprise_value_bn=ev,
      equity_value_bn=equity,
      value_per_share=vps,
      wacc=a.wacc,
  )
