# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core infrastructure for zip-archive.

This module collects the foundational helpers used across the codebase:
configuration, error types, structured logging, and enumeration of the
directories to archive.
"""
