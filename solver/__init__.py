"""Tiling solvers: baseline, guillotine DP, routing and result assembly."""
