"""
suiwallet - Wallet-side coin selection for Sui
"""

__version__ = "0.1.0"
