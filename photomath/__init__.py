# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
Welcome to photomath

The dense linear algebra and rotation representation core used by the photogrammetry tools.  The package is split
into :mod:`photomath.algebra` (vectors, matrices and the LU solver) and :mod:`photomath.rotations` (quaternions,
rotation matrices, euler angles and axis angle rotations and the conversions between them).
"""

import warnings

from photomath.algebra.errors import NumericalFallbackWarning


# fallback values replacing ill-defined results are reported every time they happen
warnings.filterwarnings("always", category=NumericalFallbackWarning)


__version__ = '1.0.0'
