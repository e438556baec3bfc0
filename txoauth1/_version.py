# This is the version of this source code.

manual_verstr = "0.1"

auto_build_num = "0"

verstr = manual_verstr + "." + auto_build_num
__version__ = verstr
