"""
Discount rate policies.

These policies determine the WACC handed to the DCF engine.
"""

import logging
from abc import ABC
from abc import abstractmethod

from equity_valuation.domain.clamps import safe_float
from equity_valuation.domain.types import PolicyOutput

logger = logging.getLogger(__name__)

MIN_WACC_SPREAD = 0.005


def cost_of_equity(rf: float, beta: float, erp: float) -> float:
  """CAPM cost of equity: rf + beta * erp."""
  return rf + beta * erp


class WACCPolicy(ABC):
  """
  Base class for discount rate policies.

  Subclasses implement compute() to return the effective WACC.
  """

  @abstractmethod
  def compute(self, terminal_growth: float) -> PolicyOutput[float]:
    """
    Compute the WACC to discount with.

    Args:
      terminal_growth: Terminal growth rate the WACC must stay above

    Returns:
      PolicyOutput with WACC and diagnostics
    """


class SpreadGuardedWACC(WACCPolicy):
  """
  Caller-supplied WACC, raised to keep a minimum spread over terminal growth.

  The adjustment is reported in the diagnostics rather than hidden.
  """

  def __init__(self, wacc: float = 0.09, min_spread: float = MIN_WACC_SPREAD):
    """
    Initialize spread-guarded WACC policy.

    Args:
      wacc: Requested WACC (default: 9%)
      min_spread: Minimum WACC - g spread (default: 0.5pp)
    """
    self.wacc = safe_float(wacc)
    self.min_spread = safe_float(min_spread, MIN_WACC_SPREAD)

  def compute(self, terminal_growth: float) -> PolicyOutput[float]:
    """Return max(wacc, terminal_growth + min_spread).

    A non-finite WACC or growth rate is read as 0, as in DCFAssumptions.
    """
    terminal_growth = safe_float(terminal_growth)
    floor = terminal_growth + self.min_spread
    effective = max(self.wacc, floor)
    adjusted = effective != self.wacc
    if adjusted:
      logger.debug('WACC %.4f raised to %.4f (terminal growth %.4f)',
                   self.wacc, effective, terminal_growth)
    return PolicyOutput(value=effective,
                        diag={
                            'discount_method': 'spread_guarded',
                            'wacc_input': self.wacc,
                            'wacc_effective': effective,
                            'wacc_adjusted': adjusted,
                            'min_spread': self.min_spread,
                        })
