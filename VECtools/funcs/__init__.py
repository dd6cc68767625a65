"""
VECtools functional areas: scalar arithmetic, combinators and vector algebra.
"""
