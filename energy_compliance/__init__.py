"""
Energy code compliance engine.

Pure calculation and validation core for residential energy-code field
testing: duct leakage and blower door metrics, Minnesota 2020 thresholds,
and the business-record rules around builders, contacts, agreements and
site hierarchy.
"""

__version__ = "0.1.0"
