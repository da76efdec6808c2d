"""
Core numeric primitives and geometry value objects.

This module contains the foundational building blocks that are independent
of rendering, scene graphs, and user interaction.
"""
