"""
db/ - Database Layer
====================
Engine lifecycle, schema initialization, and the NorthwindContext façade
that every query routine works through.
"""
