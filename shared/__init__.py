"""
Shared Kernel

This module contains base classes and utilities shared by the booking,
closure and pricing contexts: slot value objects, domain exceptions, the
unit of work and the API error envelope.
"""
