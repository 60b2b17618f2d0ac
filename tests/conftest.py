"""
Pytest configuration for bezier_wobble tests.

Puts src/ on sys.path so the tests run from a plain checkout.
"""

import sys
import os

_src_root = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
if _src_root not in sys.path:
    sys.path.insert(0, _src_root)
