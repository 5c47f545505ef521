"""BuildMarket Core - Construction Marketplace Calculation Engines.

This package contains the deterministic core of the BuildMarket
construction marketplace.

Architecture:
- Engines: Area conversion, material quantities, budget estimation
- Validators: Calculator and payment input checks
- Services: Validated calculator/budget entry points, analytics aggregation
"""

__version__ = "1.0.0"
