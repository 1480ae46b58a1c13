"""Service registration intake: document requirement resolution and checkout handshake."""
