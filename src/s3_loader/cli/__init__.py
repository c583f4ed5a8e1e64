"""Command line interface for s3-loader."""
