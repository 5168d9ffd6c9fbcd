"""
Vacation pay calculator: fixed holiday calendar and statutory pay formula.
"""

__version__ = "1.0.0"
