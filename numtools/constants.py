# numtools/constants.py
"""Library-wide defaults."""

DEFAULT_NUM = 50          # samples produced by linspace/geomspace
SMALL_X_EPS_FACTOR = 2    # sqrtm1 switches to x/2 below this many eps

DEFAULT_METHOD = "loglog"
METHODS = ("loglog", "xlog", "ylog")
