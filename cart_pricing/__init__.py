"""
Cart Pricing

Cart aggregation and tiered-discount pricing engine.
"""

__version__ = "1.0.0"
