"""Grooming estimator — breed/service pricing, add-ons and inquiry emails."""

__version__ = "1.0.0"
