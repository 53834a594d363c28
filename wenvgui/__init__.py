"""
wenvgui - GUI support utilities for the Weka virtual environment manager.
"""

__version__ = "0.1.0"
