"""
Baseline metrics derived from the company plan and balance sheet.

All per-share conversions return 0 when shares <= 0.
"""

from equity_valuation.domain.types import BN
from equity_valuation.domain.types import BaselineMetrics
from equity_valuation.domain.types import CompanyFinancials


def plan_eps(plan_npat_bn: float, shares: float) -> float:
  """Plan EPS in VND/share."""
  return plan_npat_bn * BN / shares if shares > 0 else 0.0


def price_from_pe(eps: float, pe: float) -> float:
  return eps * pe


def net_cash(cash_bn: float, htm_bn: float, borrow_bn: float) -> float:
  """Cash plus held-to-maturity investments less borrowings."""
  return cash_bn + htm_bn - borrow_bn


def book_value_per_share(total_equity_bn: float, shares: float) -> float:
  return total_equity_bn * BN / shares if shares > 0 else 0.0


def forward_pe(price: float, eps: float) -> float:
  return price / eps if eps > 0 else 0.0


def market_cap_bn(price: float, shares: float) -> float:
  return price * shares / BN


def price_to_book(price: float, bvps: float) -> float:
  return price / bvps if bvps > 0 else 0.0


def compute_baseline(
    financials: CompanyFinancials,
    pb_multiple: float,
) -> BaselineMetrics:
  """
  Bundle the headline metrics for one financial snapshot.

  Args:
    financials: Company snapshot
    pb_multiple: Target P/B multiple for the P/B-implied value

  Returns:
    BaselineMetrics
  """
  eps = plan_eps(financials.plan_npat_bn, financials.shares)
  bvps = book_value_per_share(financials.total_equity_bn, financials.shares)
  return BaselineMetrics(
      plan_eps=eps,
      forward_pe=forward_pe(financials.price, eps),
      net_cash_bn=net_cash(financials.cash_bn, financials.htm_bn,
                           financials.borrow_bn),
      bvps=bvps,
      pb_value=bvps * pb_multiple,
      pb_current=price_to_book(financials.price, bvps),
      market_cap_bn=market_cap_bn(financials.price, financials.shares),
  )
