"""Monetary domain package.

This package contains the Currency identity and the exact Money value type, with
fixed-scale decimal arithmetic, comparison, rounding and currency conversion.
"""
