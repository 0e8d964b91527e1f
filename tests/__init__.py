"""
Only the root tests directory carries an __init__.py; subdirectories under tests/unit/ are
namespace packages. Test module basenames must therefore stay unique across the tree.
"""
