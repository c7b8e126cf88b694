"""
String sets service.

A FastAPI application that stores uploaded string sets in memory, answers
aggregate queries over them and exposes the longest chain solver.
"""
