"""
Blended valuation across the P/E, DCF and P/B methods.

Each method carries a raw weight (0-100) and an enabled flag. Disabled
methods get weight 0; the rest are normalized to sum to 1. An all-disabled
configuration is valid and blends to 0.
"""

from equity_valuation.domain.clamps import clamp_weight
from equity_valuation.domain.types import BlendedValuation
from equity_valuation.domain.types import MethodWeight
from equity_valuation.domain.types import NormalizedWeights


def _effective_weight(w: MethodWeight) -> float:
  return clamp_weight(w.weight) if w.enabled else 0.0


def normalize_weights(
    pe: MethodWeight,
    dcf: MethodWeight,
    pb: MethodWeight,
) -> NormalizedWeights:
  """
  Normalize the three method weights.

  Returns:
    NormalizedWeights; all zero when the effective weights sum to 0
  """
  a = _effective_weight(pe)
  b = _effective_weight(dcf)
  c = _effective_weight(pb)
  total = a + b + c
  if total <= 0:
    return NormalizedWeights(pe=0.0, dcf=0.0, pb=0.0, total=0.0)
  return NormalizedWeights(pe=a / total, dcf=b / total, pb=c / total,
                           total=total)


def blend_valuation(
    pe_value: float,
    dcf_value: float,
    pb_value: float,
    weights: NormalizedWeights,
    price: float,
) -> BlendedValuation:
  """
  Combine method values into one fair value per share.

  Args:
    pe_value: P/E-implied price
    dcf_value: DCF value per share
    pb_value: P/B-implied price
    weights: Output of normalize_weights
    price: Current market price

  Returns:
    BlendedValuation with upside vs price (0 if price <= 0)
  """
  value = (weights.pe * pe_value + weights.dcf * dcf_value +
           weights.pb * pb_value)
  return BlendedValuation(
      pe_value=pe_value,
      dcf_value=dcf_value,
      pb_value=pb_value,
      weights=weights,
      value=value,
      upside=value / price - 1 if price > 0 else 0.0,
  )
