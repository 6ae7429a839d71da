"""
coin-dl: cryptocurrency prices and market data in the terminal.
"""

__version__ = "0.3.0"
