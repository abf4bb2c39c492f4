"""
WebSocket Package

Socket.IO event handlers for live game updates.
"""

from .handlers import register_websocket_handlers

__all__ = ['register_websocket_handlers']
