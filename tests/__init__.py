"""
Only the root tests directory carries an __init__.py; subdirectories are namespace
packages (PEP 420). Test module basenames must therefore stay unique across the tree.
"""
