from __future__ import annotations

from typing import Callable, List, TypeVar, Union, Tuple, Any, Sequence
from typing_extensions import Literal
import numpy as np
from numpy.typing import ArrayLike


_WindowSpec = Union[str, Tuple[Any, ...], float, Callable[[int], np.ndarray], ArrayLike]
_T = TypeVar("_T")
_SequenceLike = Union[Sequence[_T], np.ndarray]
_ScalarOrSequence = Union[_T, _SequenceLike[_T]]

# Scalar aliases mirroring numpy/_typing/_scalars.py
_BoolLike_co = Union[bool, np.bool_]
_IntLike_co = Union[_BoolLike_co, int, "np.integer[Any]"]
_FloatLike_co = Union[_IntLike_co, float, "np.floating[Any]"]

# Frame-to-frame distances supported by the aligners
_Metric = Literal["euclidean", "manhattan"]

# Row-major stacks of feature vectors, one row per time step
_FeatureSequence = Union[List[Sequence[float]], np.ndarray]
