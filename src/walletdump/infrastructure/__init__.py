"""
Infrastructure layer: logging and error handling
"""
