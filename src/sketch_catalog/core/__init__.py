"""Shared plumbing: configuration, upstream fetch, memoization."""
