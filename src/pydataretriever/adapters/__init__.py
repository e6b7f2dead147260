"""Adapters connecting the core to subprocesses and data libraries."""
