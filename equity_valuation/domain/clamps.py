"""
Named clamp helpers for rate-like assumptions.

Every range the engine enforces lives here so that callers (slider values,
JSON configs) can hand in anything and still get a well-defined output.
Non-finite values collapse to the lower bound of the range.
"""

from math import isfinite
from typing import Any

RAMP_MIN, RAMP_MAX = 0.0, 1.0
OP_LEVERAGE_MIN, OP_LEVERAGE_MAX = 0.5, 2.0
SSSG_MIN, SSSG_MAX = -0.05, 0.20
SSSG_DELTA_MIN = -1.0
OTHER_CAGR_MIN, OTHER_CAGR_MAX = -0.05, 0.20
RETAIL_SHARE_MIN, RETAIL_SHARE_MAX = 0.0, 1.0
REINVESTMENT_MIN, REINVESTMENT_MAX = 0.0, 0.95
WEIGHT_MIN, WEIGHT_MAX = 0.0, 100.0


def safe_float(x: Any, fallback: float = 0.0) -> float:
  """Coerce x to a finite float, returning fallback when that fails."""
  try:
    value = float(x)
  except (TypeError, ValueError):
    return fallback
  return value if isfinite(value) else fallback


def clamp(x: float, lo: float, hi: float) -> float:
  """Clamp x into [lo, hi]. NaN maps to lo."""
  return min(hi, max(lo, x))


def clamp_ramp(ramp: float) -> float:
  return clamp(ramp, RAMP_MIN, RAMP_MAX)


def clamp_op_leverage(op_leverage: float) -> float:
  return clamp(op_leverage, OP_LEVERAGE_MIN, OP_LEVERAGE_MAX)


def clamp_sssg(sssg: float) -> float:
  """Absolute same-store growth; mild declines allowed under stress."""
  return clamp(sssg, SSSG_MIN, SSSG_MAX)


def clamp_sssg_delta(sssg_delta: float) -> float:
  """SSSG delta vs plan, floored so (1 + delta) stays non-negative.

  There is no upper cap. NaN maps to the floor.
  """
  return max(SSSG_DELTA_MIN, sssg_delta)


def clamp_other_cagr(other_cagr: float) -> float:
  return clamp(other_cagr, OTHER_CAGR_MIN, OTHER_CAGR_MAX)


def clamp_retail_share(retail_share: float) -> float:
  return clamp(retail_share, RETAIL_SHARE_MIN, RETAIL_SHARE_MAX)


def clamp_reinvestment_rate(rate: float) -> float:
  return clamp(rate, REINVESTMENT_MIN, REINVESTMENT_MAX)


def clamp_weight(weight: float) -> float:
  return clamp(weight, WEIGHT_MIN, WEIGHT_MAX)
