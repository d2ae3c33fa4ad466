"""
Test suite for bignum-rsa

Contains:
- tests/unit/          : Unit tests for arithmetic, codec, chunking, contracts, CLI
"""
