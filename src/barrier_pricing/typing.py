from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

# typing only
type FloatArray = NDArray[np.floating]
