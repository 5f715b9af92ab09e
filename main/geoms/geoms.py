import math


def getDistance(p1, p2):
    return math.sqrt((p1[0] - p2[0]) ** 2 + (p1[1] - p2[1]) ** 2)


# Linear interpolation from p1 to p2, t in [0, 1] stays on the segment
def lerp(p1, p2, t):
    return [(1 - t) * p1[0] + t * p2[0], (1 - t) * p1[1] + t * p2[1]]
