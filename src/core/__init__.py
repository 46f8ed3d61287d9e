"""
Core numeric primitives and type-capability invariants.

This module contains the reduction building blocks; they are pure
functions with no dependency on external systems.
"""
