from .common import to_sequence
