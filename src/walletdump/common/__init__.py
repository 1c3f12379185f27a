"""
Common definitions shared across walletdump
"""
