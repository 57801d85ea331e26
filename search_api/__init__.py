"""Typed client for the OpenSearch HTTP API."""
