"""Smoke tests for the CLI entrypoint.

These tests execute the installed `wksc` binary to validate core user flows.
Keep them fast, end-to-end, and separate from MCP integration coverage.
"""
