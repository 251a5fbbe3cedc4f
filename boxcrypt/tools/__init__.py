"""
Command-line tools for boxcrypt.
"""
