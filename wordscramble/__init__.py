"""Word scramble game server."""
