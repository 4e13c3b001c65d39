"""Domain package.

This package contains the immutable value types of precise_amount: the exact
DecimalValue, the Precision model with its rounding engine, the unit classifier
and the Amount that bundles them.
"""
