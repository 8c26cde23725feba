"""Product catalog service.

In-memory product catalog exposed over a JSON HTTP API.
"""

__version__ = "1.0.0"
