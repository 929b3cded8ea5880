"""Spline data types, bitmap thinning and writers for SVG, PDF, PostScript, HPGL, POV-Ray, Sketch and UGS."""

__version__ = "0.1.0"