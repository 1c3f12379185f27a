"""
walletdump - encrypted key recovery for legacy BerkeleyDB wallet files
"""

__version__ = "0.1.0"
