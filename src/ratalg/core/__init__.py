"""
Core domain models, mathematical primitives, and error taxonomy.

This module contains the foundational building blocks of the expression
algebra: the value-type expression tree, numerical safeguards, errors,
and the serialized-expression contract.
"""
