"""Transact: staff records with a transactions list"""

__version__ = "0.1.0"
