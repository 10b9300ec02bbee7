"""
Dummy data generator service
Placeholder JSON/XML payloads shaped by field count, nesting and array size
"""
__version__ = "1.0.0"
