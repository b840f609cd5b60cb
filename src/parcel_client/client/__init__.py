"""HTTP transport, authentication and error types."""
