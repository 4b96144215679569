"""
Core geometric primitives and the algebra they share.

Everything here is a pure value computation, independent of any
physical-design algorithm built on top of it.
"""
