"""
Custom Example Test Suite

- Unit tests for the resolver, client, reconciler and projector
- Provider and Pulumi dynamic provider tests against a fake store
- CLI tests through typer's CliRunner
"""
