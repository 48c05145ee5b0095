"""Globe geometry optimizer.

Shrinks country/region outline GeoJSON for use as decorative globe
geometry: Douglas-Peucker simplification per ring, coordinate
quantization, and stripping of per-feature properties and the
top-level ``crs`` member.
"""

__version__ = "0.1.0"
