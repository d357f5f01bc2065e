"""
Basic import tests to verify module structure
"""


def test_basic_imports():
    """Test basic module imports"""
    # Test utils modules
    from utils.config_manager import UnifiedConfigManager
    from utils.logging_manager import LoggingManager
    from utils.exceptions import DestressApiError

    # Test API modules
    from api.app import app, create_app
    from api.middleware import AllowAllCORSMiddleware, LoggingMiddleware, ErrorHandlingMiddleware
    from api.models import QuoteResponse, TrackEvent

    # Test main module
    from main import DestressServer

    assert app is not None
