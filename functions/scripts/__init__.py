"""Command-line scripts for BuildMarket."""
