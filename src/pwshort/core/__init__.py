"""Shortening pipeline: split, parse, resolve, rewrite, reassemble."""
