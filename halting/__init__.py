"""
Halting - A simulation of the diagonal argument behind the Halting Problem.

Applies a simulated halting assessor to a small grid of computations,
including the case where the assessor is itself one of the computations.
"""

__version__ = "0.1.0"
__author__ = "Halting Contributors"
