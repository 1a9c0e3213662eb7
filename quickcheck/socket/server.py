import socketio

from quickcheck.core.config import get_settings
from quickcheck.socket.events import register_socket_events

settings = get_settings()

sio = socketio.AsyncServer(
    async_mode="asgi",
    cors_allowed_origins=settings.cors_origins or "*",
)
register_socket_events(sio)
