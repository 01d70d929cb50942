'''
carving.py -- random-walk worms used to carve caves and lay mineral veins
'''

import math
import numpy


def spheroid_positions(center, radius):
    """ Return the block positions inside the oblate spheroid
    dx^2 + 2*dy^2 + dz^2 < radius^2 around the real-valued `center`.

    The vertical axis is weighted by 2, which flattens the shape. Positions
    are not bounds checked.

    Returns
    -------
    list of (x, y, z) int tuples, sorted

    """
    if radius <= 0:
        return []
    d = numpy.arange(-radius, radius, 1.0)
    dx, dy, dz = numpy.meshgrid(d, d, d, indexing='ij')
    inside = dx*dx + 2*dy*dy + dz*dz < radius*radius
    if not inside.any():
        return []
    offsets = numpy.stack([dx[inside], dy[inside], dz[inside]], axis=-1)
    points = numpy.floor(offsets + numpy.array(center, dtype=float)).astype(numpy.int64)
    points = numpy.unique(points, axis=0)
    return [tuple(int(v) for v in p) for p in points]


class CarveWalker(object):
    '''
    Drunkard's walk through the world along a direction given by two angles.

    Each step the angles drift by momentum terms (delta_theta, delta_phi)
    which are themselves damped random walks; `phi_damping` is the damping
    of delta_phi and is what distinguishes cave worms from vein worms. With
    probability `stamp_chance` a step stamps a spheroid around the current
    position (jittered by up to 2*`jitter` per axis) and hands every position
    inside to `fill`.
    '''
    THETA_RATE = 0.2
    THETA_DAMPING = 0.9

    def __init__(self, rng, phi_damping, stamp_chance=1.0, jitter=0.0):
        self.rng = rng
        self.phi_damping = phi_damping
        self.stamp_chance = stamp_chance
        self.jitter = jitter

    def _jitter(self):
        return (self.rng.random() * 4.0 - 2.0) * self.jitter

    def walk(self, start, length, theta, phi, radius_at, fill):
        """ Walk `length` steps from `start`.

        `radius_at(center_y, taper)` returns the stamp radius at a step,
        where taper = sin(step*pi/length) grows then shrinks over the walk.
        `fill(position)` is called for each position inside a stamp.
        Returns the number of stamps applied.

        """
        rng = self.rng
        x, y, z = (float(c) for c in start)
        delta_theta = 0.0
        delta_phi = 0.0
        stamps = 0
        for step in range(int(length)):
            x += math.sin(theta) * math.cos(phi)
            y += math.cos(theta) * math.cos(phi)
            z += math.sin(phi)
            theta += delta_theta * self.THETA_RATE
            delta_theta *= self.THETA_DAMPING
            delta_theta += rng.random()
            delta_theta -= rng.random()
            phi /= 2.0
            phi += delta_phi / 4.0
            delta_phi *= self.phi_damping
            delta_phi += rng.random()
            delta_phi -= rng.random()
            if self.stamp_chance < 1.0 and rng.random() >= self.stamp_chance:
                continue
            if self.jitter:
                center = (x + self._jitter(), y + self._jitter(), z + self._jitter())
            else:
                center = (x, y, z)
            radius = radius_at(center[1], math.sin(step * math.pi / length))
            for position in spheroid_positions(center, radius):
                fill(position)
            stamps += 1
        return stamps
