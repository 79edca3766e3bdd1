"""
cookview - Client-side recipe model for a cooklang recipe server.

Modules:
- recipe: Components, tagged step chunks, quantity normalization, codec
- client: HTTP client for the recipe server API
- config: Environment-driven settings
"""

__version__ = "0.1.0"
