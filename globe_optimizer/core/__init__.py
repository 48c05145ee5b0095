"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants and GeoJSON member names
- exceptions: Custom exception hierarchy
"""
