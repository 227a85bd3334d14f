"""Integration clients: real_http (hosted backend) and mocks (local store)."""
