from typing import Union, Literal

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = npt.NDArray[np.float64]
ARRAY_LIKE = npt.ArrayLike
ARRAY_LIKE_2D = npt.ArrayLike
SCALAR_OR_ARRAY = Union[float, npt.ArrayLike]

EULER_ORDERS = Literal['xyz', 'xzy', 'xyx', 'xzx', 'yxz', 'yzx', 'yxy', 'yzy', 'zxy', 'zyx', 'zyz', 'zxz']

INVERSE_METHODS = Literal['adjugate', 'lu']

ZERO_PIVOT_POLICIES = Literal['substitute', 'raise']
