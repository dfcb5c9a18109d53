"""
services/ - Query Layer
=======================
Each service composes queries through a NorthwindContext, runs them, and
turns the results into console text. Every call opens and closes its own
context.
"""
