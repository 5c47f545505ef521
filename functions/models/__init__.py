"""Pydantic models for BuildMarket calculators, budgets, analytics and payments."""
