"""
API module for the de-stress site backend.
Provides the FastAPI application serving quotes and analytics tracking.
"""

__all__ = ['app', 'routes', 'models', 'quotes']
