"""
Core domain models, arithmetic primitives, and contracts.

This module contains the digit-vector integer, the arithmetic engine built
on it, and the key material and record models consumed by the cipher.
"""
