"""
Core domain models, mathematical primitives, and error taxonomy.

This module contains the foundational building blocks that are independent
of sampling strategy and of any serialization format.
"""
