"""
Element calculators.

Pure Python math. Each maps a list of element rows to computed rows
and a Totals record; the polygon calculator returns an area instead.
"""
