"""
Tooth Trauma Tutor

Educational simulation of a damaged tooth reacting to household remedies.
"""
__version__ = "1.0.0"
