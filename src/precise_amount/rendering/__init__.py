"""Rendering package.

Plain-string and locale-aware renderers for Amount, plus the pluggable locale formatter.
"""
