from .kendall_tau import KendallTau, SizeMismatchError, compute_kendall_tau, tie_groups
