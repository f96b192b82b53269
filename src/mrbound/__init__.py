"""Miller-Rabin round counts for a random k-bit probable prime search."""

from .estimators import estimate, dlp_estimate, rbj_estimate, ESTIMATORS
from .monier import MONIER_P_K1
from .thresholds import (
    build_threshold_table,
    find_kmax,
    rounds_required,
)
