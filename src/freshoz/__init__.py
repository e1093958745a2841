"""Freshoz geospatial backend: address geocoding, distances and rider assignment."""
