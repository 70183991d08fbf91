"""
Shared helpers for the landing page app.
"""
