"""
Quantity take-off engine for reinforced-concrete and masonry construction.

Pure calculation: element rows in, material quantities out.
"""
