'''
Store-driven equity valuation engine.

Blends three valuation methods (P/E multiple, FCFF DCF, price-to-book) into
one fair value. Scenario earnings and the DCF revenue path are driven by
operating KPIs: store count, new-store ramp and same-store-sales growth,
anchored to the company's own plan.

Usage:
  from equity_valuation.scenarios.config import ValuationConfig
  from equity_valuation.run import run_valuation

  config = ValuationConfig.default()
  report = run_valuation(config)
'''
