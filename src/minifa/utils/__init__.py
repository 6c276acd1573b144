"""
Utility modules for MiniFA: logging and console output
"""
