from rankcorr.metric import KendallTau, SizeMismatchError, compute_kendall_tau, tie_groups

__version__ = "0.1.0"
