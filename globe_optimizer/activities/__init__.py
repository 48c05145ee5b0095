"""Pipeline activities.

Each activity performs a single unit of work:
- simplify: Douglas-Peucker ring simplification, quantization, geometry dispatch
- optimize_collection: Per-feature stripping and simplification of a collection
- globe_file: Read, optimize, and write a GeoJSON file with size reporting
"""
