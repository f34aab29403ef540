"""
delaystart - Work out the delayed-start setting for a timed appliance program.
"""

__version__ = "0.1.0"
