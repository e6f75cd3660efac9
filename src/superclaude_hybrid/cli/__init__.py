"""Command-line interface for SuperClaude Hybrid."""
