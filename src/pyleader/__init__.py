# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	pyleader: leader-key action menus backed by a JSON config tree.
#
# Notes:
#	Keep this lightweight; import from the subpackages.
# ---------------------------------------------------------------------------

__version__ = "0.1.0"
