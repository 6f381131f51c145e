"""Use-case layer orchestrating canvas gestures.

Modules coordinate the field collection store without touching presentation
code, preserving MVVM + Hexagonal boundaries.
"""
