"""
Adapters — the only code that touches the package manager or the host OS.
"""
