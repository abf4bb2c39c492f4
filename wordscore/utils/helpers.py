"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Any, Dict, Optional


def get_user_identity(request_obj) -> Dict[str, Optional[str]]:
    """Extract user identity information from a request (or request-like) object."""
    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None),
    }


def json_body(request_obj) -> Dict[str, Any]:
    """Request JSON body as a dict; empty when missing or not an object."""
    data = request_obj.get_json(silent=True)
    return data if isinstance(data, dict) else {}
