"""
Cloth Color Colors Module

Provides RGB to HSV conversion, palette classification, region sampling and
k-means dominant color extraction for clothing regions cropped from camera
frames.
"""

__version__ = "1.0.0"
