"""Infrastructure: HTTP transport, remote API client, catalog and storage."""
