"""A small Monte Carlo path tracer that renders a sphere scene into a window."""

__version__ = "0.1.0"