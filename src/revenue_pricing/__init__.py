"""
Revenue Pricing Package

A revenue-tiered pricing calculator for garage, shop and mobile services.
Resolves usage cost per revenue stream using Tier → Rate → Discount pipeline
with static multi-currency conversion.
"""

__version__ = "1.0.0"
