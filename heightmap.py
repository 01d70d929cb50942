import numpy

from location import world_limits


class HeightField(object):
    '''
    Elevation of the topmost block of every (x, z) column of a world.

    Indexed by signed world coordinates; the backing array is offset by the
    negative world limit in both axes. No validation beyond the array bounds,
    callers check coordinates first.
    '''
    def __init__(self, size):
        self.size = size
        self.negative_limit, self.positive_limit = world_limits(size)
        self.heights = numpy.zeros((size, size), dtype='i2')

    def get(self, x, z):
        return int(self.heights[x - self.negative_limit, z - self.negative_limit])

    def set(self, x, z, elevation):
        self.heights[x - self.negative_limit, z - self.negative_limit] = elevation

    def as_array(self):
        return self.heights.copy()
