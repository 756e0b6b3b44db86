"""
Application layer for the stretch routine API.

This package contains:
- ports/: Interfaces for the external collaborators (catalog, settings, entitlements)
- exceptions: Errors shared by application and infrastructure layers
"""
