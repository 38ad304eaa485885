'''
Revenue model policies.

A revenue policy turns base-year revenue into the explicit five-year revenue
path fed to the DCF engine. The choice between a flat CAGR and the
store-driven path is made by picking a policy, not by a flag read inside the
engine.
'''

from abc import ABC, abstractmethod
from typing import List

from equity_valuation.domain.types import N_YEARS
from equity_valuation.domain.types import PolicyOutput
from equity_valuation.domain.types import StoreDCFSeriesParams
from equity_valuation.domain.types import StoreRevenuePath
from equity_valuation.engine.dcf import project_revenue_path
from equity_valuation.engine.store_path import build_store_revenue_path


class RevenuePolicy(ABC):
  '''
  Base class for revenue path policies.

  Subclasses implement compute() to return the explicit-period revenues.
  '''

  @abstractmethod
  def compute(self, base_revenue_bn: float,
              base_year: int = 2025) -> PolicyOutput[List[float]]:
    '''
    Compute revenue path for the explicit forecast period.

    Args:
      base_revenue_bn: Base-year revenue
      base_year: Calendar year of the base revenue

    Returns:
      PolicyOutput with N_YEARS revenues and diagnostics
    '''


class CAGRRevenue(RevenuePolicy):
  '''Revenue compounding at a single CAGR from the base year.'''

  def __init__(self, cagr: float = 0.08):
    '''
    Initialize CAGR revenue policy.

    Args:
      cagr: Annual revenue growth (default: 8%)
    '''
    self.cagr = cagr

  def compute(self, base_revenue_bn: float,
              base_year: int = 2025) -> PolicyOutput[List[float]]:
    '''Return base_revenue * (1 + cagr)^t for t = 1..N_YEARS.'''
    return PolicyOutput(value=project_revenue_path(base_revenue_bn, self.cagr),
                        diag={
                            'revenue_method': 'cagr',
                            'cagr': self.cagr,
                        })


class StorePathRevenue(RevenuePolicy):
  '''
  Revenue driven by store openings and SSSG.

  A retail_share of revenue follows the store count and same-store growth;
  the remainder grows at other_cagr.
  '''

  def __init__(
      self,
      retail_share: float = 0.85,
      other_cagr: float = 0.03,
      store_start: float = 0.0,
      net_new_per_year: float = 0.0,
      ramp: float = 0.7,
      sssg_abs: float = 0.04,
  ):
    '''
    Initialize store-driven revenue policy.

    Args:
      retail_share: Fraction of revenue linked to stores (default: 85%)
      other_cagr: Growth of the non-store revenue (default: 3%)
      store_start: Store count at the end of the base year
      net_new_per_year: Net stores opened per forecast year
      ramp: First-year productivity of new stores (default: 0.7)
      sssg_abs: Absolute SSSG per year (default: 4%)
    '''
    self.retail_share = retail_share
    self.other_cagr = other_cagr
    self.store_start = store_start
    self.net_new_per_year = net_new_per_year
    self.ramp = ramp
    self.sssg_abs = sssg_abs

  def build(self, base_revenue_bn: float,
            base_year: int = 2025) -> StoreRevenuePath:
    '''Build the full store path, rows included.'''
    return build_store_revenue_path(
        StoreDCFSeriesParams(
            base_revenue_bn=base_revenue_bn,
            retail_share=self.retail_share,
            other_cagr=self.other_cagr,
            store_start=self.store_start,
            net_new_per_year=self.net_new_per_year,
            ramp=self.ramp,
            sssg_abs=self.sssg_abs,
            base_year=base_year,
        ), N_YEARS)

  def compute(self, base_revenue_bn: float,
              base_year: int = 2025) -> PolicyOutput[List[float]]:
    '''Return the store-driven revenues.'''
    path = self.build(base_revenue_bn, base_year)
    final = path.rows[-1]
    return PolicyOutput(value=path.revenues,
                        diag={
                            'revenue_method': 'store_path',
                            'implied_cagr': path.implied_cagr,
                            'retail_share': self.retail_share,
                            'other_cagr': self.other_cagr,
                            'store_start': self.store_start,
                            'net_new_per_year': self.net_new_per_year,
                            'sssg_abs': final.sssg_abs,
                            'final_stores': final.stores_end,
                        })
