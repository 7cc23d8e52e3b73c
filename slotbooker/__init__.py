"""
slotbooker - view a day's appointment slots and book them.
"""

__version__ = "0.1.0"
