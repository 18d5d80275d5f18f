from __future__ import annotations

from typing import List, Tuple

import numpy as np
from scipy import ndimage as ndi


def label_components(mask: np.ndarray) -> Tuple[np.ndarray, int]:
    """Connected components (8-neigh)."""
    lab, n = ndi.label(mask, structure=ndi.generate_binary_structure(2, 2))
    return lab, int(n)


def component_sizes(mask: np.ndarray) -> List[int]:
    lab, n = label_components(mask)
    if n == 0:
        return []
    return [int(v) for v in np.bincount(lab.ravel())[1:]]
