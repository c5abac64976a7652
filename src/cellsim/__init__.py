"""
cellsim: 2D Cell Absorption Simulator

A population of circular cells wanders across a bounded world:
- Each cell takes a unit step per tick along a jittering heading
- Headings are weakly pulled toward the middle of the world
- Every live cell grows a little each tick
- Touching cells merge: the larger absorbs area from the smaller and the
  two circles end up tangent with the same total area, unless the overlap
  is deep enough that the smaller vanishes and becomes inert

Over time the population coarsens into a few large cells.
"""

__version__ = "0.1.0"
