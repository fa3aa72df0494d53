"""Command-line interface for ubxgen."""
