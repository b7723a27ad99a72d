import typing

import numpy
import torch


def to_sequence(values) -> typing.Tuple:
    '''
    Convert a ranking into an immutable tuple of plain python scalars.
    Tensors and arrays are flattened row-major before conversion.
    '''
    if torch.is_tensor(values):
        return tuple(values.detach().cpu().flatten().tolist())
    elif isinstance(values, numpy.ndarray):
        return tuple(values.ravel().tolist())
    elif isinstance(values, typing.Iterable):
        return tuple(values)
    else:
        raise ValueError("The parameter 'values' should be a sequence, numpy array or pytorch tensor, but found {}"
                         .format(type(values)))
