"""
Destress API Test Suite
=======================

This package contains tests for the de-stress site backend including:
- Unit tests for routes, middleware and utilities
- Integration tests for the assembled application
"""
