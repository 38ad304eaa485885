'''
Quarterly store tracker: planned vs. reported store counts.

The Base plan assumes net openings spread linearly over the four quarters.
The most recent reported count seeds the store-driven DCF path.
'''

import math
from collections.abc import Sequence
from typing import List, Optional

import pandas as pd

from equity_valuation.domain.clamps import safe_float

QUARTERS = ('Q1', 'Q2', 'Q3', 'Q4')


def _round_half_up(x: float) -> int:
  return int(math.floor(x + 0.5))


def planned_stores_by_quarter(start_stores: float,
                              net_new_stores: float) -> List[int]:
  '''Planned end-of-quarter store counts for Q1..Q4.'''
  s0 = max(0.0, safe_float(start_stores))
  nn = safe_float(net_new_stores)
  return [
      _round_half_up(s0 + nn * (q / len(QUARTERS)))
      for q in range(1, len(QUARTERS) + 1)
  ]


def latest_actual_stores(actuals: Sequence[Optional[float]],
                         start_stores: float) -> float:
  '''Last finite reported store count, or start_stores if none.'''
  for value in reversed(list(actuals)):
    if value is None:
      continue
    try:
      v = float(value)
    except (TypeError, ValueError):
      continue
    if math.isfinite(v):
      return v
  return start_stores


def store_tracker_frame(
    start_stores: float,
    net_new_stores: float,
    actuals: Sequence[Optional[float]],
) -> pd.DataFrame:
  '''
  Planned vs. actual store counts per quarter.

  Args:
    start_stores: Store count at the start of the year
    net_new_stores: Planned net openings for the year
    actuals: Reported end-of-quarter counts (None if not reported)

  Returns:
    DataFrame indexed by quarter with 'planned', 'actual' and 'gap' columns
  '''
  planned = planned_stores_by_quarter(start_stores, net_new_stores)
  actual = list(actuals)[:len(QUARTERS)]
  actual += [None] * (len(QUARTERS) - len(actual))

  df = pd.DataFrame(
      {
          'planned': planned,
          'actual': pd.to_numeric(pd.Series(actual, dtype=object),
                                  errors='coerce').to_list(),
      },
      index=pd.Index(QUARTERS, name='quarter'),
  )
  df['gap'] = df['actual'] - df['planned']
  return df
