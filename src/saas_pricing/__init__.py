"""
SaaS Pricing Calculator Package

Derives subscription pricing and revenue metrics from six business inputs.
Visitors → Customers → Lifetime Value → Recommended Price pipeline with fixed tiers.
"""

__version__ = "1.0.0"
