"""
Sui ledger constants used by coin handling.
"""

from __future__ import annotations

# Native gas coin type
SUI_COIN_TYPE = "0x2::sui::SUI"

# 1 SUI = 10^9 MIST
MIST_PER_SUI = 10**9

# Object versions are u64 on the ledger
MAX_U64 = 2**64 - 1

# When a minimum-match lookup fails with this many coins or fewer left,
# the pool is considered exhausted rather than made of coins that are too small.
SMALL_POOL_THRESHOLD = 3
