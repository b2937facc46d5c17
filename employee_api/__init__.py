"""
Employee API façade.

Re-exposes the upstream mock employee API under a stable REST contract.
"""

__version__ = "1.0.0"
