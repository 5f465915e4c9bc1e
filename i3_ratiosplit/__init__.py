"""i3 Ratio Split

Golden spiral tiling for i3.

Listens for new windows and reconfigures the split of their parent container
so the new window takes a fixed share (33% by default) of the split, with the
split orientation alternating at every level.
"""

__version__ = "1.0.0"
