"""
Simulation module containing the interactive and headless front-ends.
"""

from .interactive import Simulation
from .headless import HeadlessSimulation
from .rendering import Glyph

__all__ = ['Simulation', 'HeadlessSimulation', 'Glyph']
