"""
CLI sub-command groups and the interactive menu.
"""
