"""
Bikestore Reports - read-only analytics over the bicycle store schema
"""
__version__ = "1.0.0"
