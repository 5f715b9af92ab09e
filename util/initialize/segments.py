import numpy as np


#Generate n random non-degenerate segments inside the square bounds x bounds
def makeRandomSegments(n, bounds, seed=0, min_length=1e-6):
    rng = np.random.default_rng(seed)
    lo, hi = bounds
    if hi <= lo:
        raise ValueError(f"bounds must be increasing, got {bounds}")

    segments = []
    while len(segments) < n:
        pa = rng.uniform(lo, hi, size=2)
        pb = rng.uniform(lo, hi, size=2)
        # Zero-length segments have no direction
        if np.linalg.norm(pb - pa) < min_length:
            continue
        segments.append([pa.tolist(), pb.tolist()])
    return segments
