"""
SiteWalker package initializer.
Defines package version; the CLI lives in :mod:`site_walker.cli`.
"""
__version__ = "0.1.0"
