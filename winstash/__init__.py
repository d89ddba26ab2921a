"""winstash - hide the active window and bring it back later.

Window identifiers are kept in two small log-backed stacks living in the
temporary directory ("normal" and "priority"), the actual mapping and
unmapping of windows is done by xdotool.
"""
