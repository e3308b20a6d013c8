"""
ManUp - gate de atualização obrigatória.
"""

__version__ = "0.1.0"
