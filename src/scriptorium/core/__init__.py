"""Core domain: post model, category aggregation and configuration."""
