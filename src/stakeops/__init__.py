"""
Stakeops - stake deposit operation for the mining client.
"""

__version__ = "0.1.0"
