"""
Shared Kernel

Base domain classes, errors, the unit of work and the message bus used by
the spot and booking apps.
"""
