"""
Command line interface for walletdump
"""
