"""Core domain package for chanlist.

Core contains entry construction, matching, windowing and list assembly
without any snapshot storage or terminal-specific code.
"""
